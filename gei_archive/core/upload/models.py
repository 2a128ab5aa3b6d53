"""
Data models for upload module.

Uses dataclasses for type-safe data structures.
"""
from dataclasses import dataclass
from typing import Any

ARCHIVE_LOCATOR_PREFIX = 'gei://archive/'


def archive_locator(session_guid: str) -> str:
    """Build the content locator for a chunked upload."""
    return f"{ARCHIVE_LOCATOR_PREFIX}{session_guid}"


@dataclass(frozen=True)
class UploadRequest:
    """
    A single archive upload.
    
    Attributes:
        content: Readable content with a known length
        name: Archive name
        owner_id: Organization database id owning the archive
    """
    content: Any
    name: str
    owner_id: str


@dataclass
class UploadSession:
    """
    State of one chunked upload.
    
    Lives only for the duration of a single upload call.
    """
    session_guid: str
    next_url: str
    parts_uploaded: int = 0
    total_parts: int = 0
    bytes_uploaded: int = 0


@dataclass
class UploadProgress:
    """Upload progress information."""
    part_number: int = 0
    total_parts: int = 0
    bytes_uploaded: int = 0
    total_bytes: int = 0
    
    @property
    def percentage(self) -> float:
        """Get upload percentage."""
        if self.total_bytes == 0:
            return 0.0
        return (self.bytes_uploaded / self.total_bytes) * 100
    
    @property
    def is_complete(self) -> bool:
        """Check if every part was uploaded."""
        return self.total_parts > 0 and self.part_number >= self.total_parts
