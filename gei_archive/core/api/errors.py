"""HTTP transport errors."""
from typing import Optional

from ..exceptions import ArchiveUploadError


class TransportError(ArchiveUploadError):
    """Exception raised when an HTTP request cannot be completed."""
    
    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        url: Optional[str] = None
    ):
        self.method = method
        self.url = url
        super().__init__(message)


class HTTPStatusError(TransportError):
    """Exception raised when the server answers with a non-success status."""
    
    def __init__(self, status: int, method: str, url: str, body: str = ''):
        self.status = status
        self.body = body
        message = f"{method} {url} failed with HTTP {status}"
        if body:
            message += f": {body[:200]}"
        super().__init__(message, method=method, url=url)
