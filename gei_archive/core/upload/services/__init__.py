"""Upload services module."""
from .single_shot import SingleShotUploader
from .chunked import ChunkedUploadSession

__all__ = [
    'SingleShotUploader',
    'ChunkedUploadSession',
]
