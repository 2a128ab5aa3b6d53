"""HTTP transport for GitHub owned storage."""
from .async_client import AsyncHttpClient, Headers
from .config import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    UploadConfig,
    DEFAULT_BASE_URL,
    DEFAULT_SIZE_THRESHOLD,
)
from .errors import TransportError, HTTPStatusError

__all__ = [
    'AsyncHttpClient',
    'Headers',
    
    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'UploadConfig',
    'DEFAULT_BASE_URL',
    'DEFAULT_SIZE_THRESHOLD',
    
    # Errors
    'TransportError',
    'HTTPStatusError',
]
