"""
Protocol definitions for upload module.

Defines the interfaces the upload core depends on, so the transport and
the content source can be swapped (and mocked in tests).
"""
from typing import Protocol, Any, Dict, List, Tuple, Callable

from .models import UploadProgress

Headers = Dict[str, List[str]]

ProgressCallback = Callable[[UploadProgress], None]


class TransportProtocol(Protocol):
    """
    Protocol for the HTTP transport.
    
    Bodies may be bytes-like, a JSON-serializable dict, a string or a
    ContentStream. Implementations raise on non-success statuses.
    """
    
    async def post(self, url: str, body: Any) -> str:
        """POST and return the response body."""
        ...
    
    async def post_with_full_response(self, url: str, body: Any) -> Tuple[str, Headers]:
        """POST and return the response body with headers."""
        ...
    
    async def patch_with_full_response(self, url: str, body: Any) -> Tuple[str, Headers]:
        """PATCH and return the response body with headers."""
        ...
    
    async def put(self, url: str, body: Any) -> str:
        """PUT and return the response body."""
        ...
