"""Tests for upload models."""
import dataclasses

import pytest

from gei_archive.core.upload.models import (
    UploadRequest,
    UploadSession,
    UploadProgress,
    archive_locator,
)


class TestArchiveLocator:
    """Test suite for archive_locator."""
    
    def test_format(self):
        assert archive_locator('abc-123') == 'gei://archive/abc-123'


class TestUploadRequest:
    """Test suite for UploadRequest."""
    
    def test_is_immutable(self):
        """Test request cannot be modified."""
        request = UploadRequest(content=b"x", name='repo.tar.gz', owner_id='1')
        
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.name = 'other'


class TestUploadSession:
    """Test suite for UploadSession."""
    
    def test_defaults(self):
        session = UploadSession(session_guid='g', next_url='https://x/part?guid=g')
        
        assert session.parts_uploaded == 0
        assert session.total_parts == 0
        assert session.bytes_uploaded == 0


class TestUploadProgress:
    """Test suite for UploadProgress."""
    
    def test_percentage(self):
        progress = UploadProgress(part_number=1, total_parts=4, bytes_uploaded=25, total_bytes=100)
        
        assert progress.percentage == 25.0
        assert not progress.is_complete
    
    def test_percentage_empty(self):
        """Test zero total bytes gives 0%."""
        assert UploadProgress().percentage == 0.0
    
    def test_complete(self):
        progress = UploadProgress(part_number=3, total_parts=3, bytes_uploaded=9, total_bytes=9)
        
        assert progress.is_complete
