"""
gei_archive - Async uploader for GitHub Enterprise Importer migration archives.

Usage:
    >>> from gei_archive import ArchiveClient
    >>> 
    >>> async with ArchiveClient(token="ghp_...") as client:
    ...     locator = await client.upload_file("repo.tar.gz", owner_id="12345")
"""
from .client import ArchiveClient
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    UploadConfig,
    AsyncHttpClient,
    TransportError,
    HTTPStatusError,
)
from .core.exceptions import (
    ArchiveUploadError,
    InvalidInputError,
    ProtocolError,
    MissingLocationHeaderError,
    MissingSessionGuidError,
    UploadFailedError,
    UploadPhase,
)
from .core.logging import setup_logging
from .core.upload import UploadOrchestrator, UploadProgress, ContentStream, open_archive

__version__ = '1.0.0'

__all__ = [
    'ArchiveClient',
    'UploadOrchestrator',
    'UploadProgress',
    'ContentStream',
    'open_archive',
    'AsyncHttpClient',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'UploadConfig',
    'ArchiveUploadError',
    'InvalidInputError',
    'ProtocolError',
    'MissingLocationHeaderError',
    'MissingSessionGuidError',
    'UploadFailedError',
    'UploadPhase',
    'TransportError',
    'HTTPStatusError',
    'setup_logging',
]
