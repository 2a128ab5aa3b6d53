"""Tests for logging module."""
import logging

import pytest

from gei_archive.core.logging import get_logger, setup_logging, PACKAGE_LOGGERS
from gei_archive.core.upload import UploadOrchestrator


class TestLogging:
    """Test suite for logging helpers."""
    
    @pytest.fixture(autouse=True)
    def restore_levels(self):
        """Restore package logger levels after each test."""
        levels = {name: logging.getLogger(name).level for name in PACKAGE_LOGGERS}
        yield
        for name, level in levels.items():
            logging.getLogger(name).setLevel(level)
    
    def test_get_logger_propagates(self):
        """Test loggers propagate to root."""
        logger = get_logger('gei_archive.upload')
        
        assert logger.name == 'gei_archive.upload'
        assert logger.propagate is True
    
    def test_setup_logging_sets_levels(self):
        """Test setup_logging configures every package logger."""
        setup_logging(logging.DEBUG)
        
        for name in PACKAGE_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG
    
    @pytest.mark.asyncio
    async def test_upload_messages(self, transport, caplog):
        """Test chunked upload logs its milestones."""
        orchestrator = UploadOrchestrator(transport, size_threshold=4)
        
        with caplog.at_level(logging.INFO, logger='gei_archive.upload.chunked'):
            await orchestrator.upload(b"0123456789", 'repo.tar.gz', '1')
        
        assert "Starting archive upload into GitHub owned storage: repo.tar.gz..." in caplog.text
        assert "Uploading part 3/3..." in caplog.text
        assert "Finished uploading archive" in caplog.text
