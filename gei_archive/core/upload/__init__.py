"""
Upload module for GEI migration archives.

Uploads small archives in one request and large ones through the chunked
blob upload protocol of GitHub owned storage.
"""
from .orchestrator import UploadOrchestrator
from .buffer import ChunkBuffer, Chunk
from .location import find_location, get_next_url, extract_session_guid
from .models import UploadRequest, UploadSession, UploadProgress, archive_locator
from .protocols import TransportProtocol, ProgressCallback
from .services import SingleShotUploader, ChunkedUploadSession
from .streams import ContentStream, open_archive

__all__ = [
    # Main classes
    'UploadOrchestrator',
    'SingleShotUploader',
    'ChunkedUploadSession',
    
    # Streaming
    'ChunkBuffer',
    'Chunk',
    'ContentStream',
    'open_archive',
    
    # Location helpers
    'find_location',
    'get_next_url',
    'extract_session_guid',
    
    # Models
    'UploadRequest',
    'UploadSession',
    'UploadProgress',
    'archive_locator',
    
    # Protocols
    'TransportProtocol',
    'ProgressCallback',
]
