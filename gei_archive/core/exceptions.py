"""
Custom exceptions for archive upload operations.

This module defines exception classes specific to GEI archive uploads.
"""
from enum import Enum
from typing import Optional


class UploadPhase(str, Enum):
    """Stage of an upload in which a failure happened."""
    
    SINGLE = 'single'
    START = 'start'
    PART = 'part'
    COMPLETE = 'complete'


class ArchiveUploadError(Exception):
    """Base exception for all archive upload errors."""
    pass


class InvalidInputError(ArchiveUploadError, ValueError):
    """Exception raised when upload arguments are unusable."""
    pass


class ProtocolError(ArchiveUploadError):
    """Exception raised when a storage response breaks the upload protocol."""
    pass


class MissingLocationHeaderError(ProtocolError):
    """Exception raised when a response lacks the Location header."""
    
    def __init__(self, message: str = "Location header is missing in the response.") -> None:
        super().__init__(message)


class MissingSessionGuidError(ProtocolError):
    """Exception raised when the first part URL carries no session guid."""
    
    def __init__(self, url: str) -> None:
        """
        Initialize the exception.
        
        Args:
            url: Part upload URL that was expected to carry ``guid``
        """
        self.url = url
        super().__init__(f"Upload session guid is missing from URL: {url}")


class UploadFailedError(ArchiveUploadError):
    """
    Exception raised when an upload phase fails.
    
    The originating exception is kept both as ``cause`` and as
    ``__cause__`` so callers can inspect it programmatically.
    """
    
    def __init__(
        self,
        message: str,
        phase: UploadPhase,
        cause: Optional[BaseException] = None,
        part_number: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            phase: Upload phase that failed
            cause: Underlying exception (if any)
            part_number: 1-based part number for part failures
        """
        self.phase = phase
        self.cause = cause
        self.part_number = part_number
        super().__init__(message)
        self.__cause__ = cause
    
    def __str__(self) -> str:
        message = super().__str__()
        if self.cause is not None:
            return f"{message} ({type(self.cause).__name__}: {self.cause})"
        return message
