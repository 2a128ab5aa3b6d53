"""Tests for ArchiveClient."""
import pytest

from gei_archive import ArchiveClient, APIConfig
from gei_archive.core.exceptions import InvalidInputError


class TestArchiveClient:
    """Test suite for ArchiveClient."""
    
    def test_token_does_not_mutate_config(self):
        """Test token is applied to a copy of the config."""
        config = APIConfig()
        
        client = ArchiveClient(token='ghp_x', config=config)
        
        assert config.token is None
        assert client._config.token == 'ghp_x'
    
    def test_threshold_override(self, transport):
        """Test size threshold reaches the orchestrator."""
        client = ArchiveClient(transport=transport, size_threshold=1024)
        
        assert client.orchestrator.size_threshold == 1024
    
    def test_base_url_from_config(self, transport):
        """Test orchestrator uses the configured base URL."""
        client = ArchiveClient(config=APIConfig(base_url='https://ghes.example.com'), transport=transport)
        
        assert client.orchestrator.base_url == 'https://ghes.example.com'
    
    @pytest.mark.asyncio
    async def test_upload_bytes(self, transport):
        """Test uploading in-memory content."""
        async with ArchiveClient(transport=transport) as client:
            locator = await client.upload(b"abc", 'repo.tar.gz', '1234')
        
        assert locator == 'gei://archive/single-7f3e'
    
    @pytest.mark.asyncio
    async def test_upload_file_chunked(self, transport, tmp_path, make_payload):
        """Test uploading a file larger than the threshold."""
        data = make_payload(2500)
        path = tmp_path / "migration.tar.gz"
        path.write_bytes(data)
        
        async with ArchiveClient(transport=transport, size_threshold=1000) as client:
            locator = await client.upload_file(path, '1234')
        
        assert locator == f"gei://archive/{transport.guid}"
        assert transport.calls[0]['body']['name'] == 'migration.tar.gz'
        assert b''.join(transport.bodies('PATCH')) == data
    
    @pytest.mark.asyncio
    async def test_upload_file_custom_name(self, transport, tmp_path):
        """Test custom archive name."""
        path = tmp_path / "migration.tar.gz"
        path.write_bytes(b"abc")
        
        async with ArchiveClient(transport=transport) as client:
            await client.upload_file(str(path), '1234', name='custom.tar.gz')
        
        assert transport.calls[0]['url'].endswith('?name=custom.tar.gz')
    
    @pytest.mark.asyncio
    async def test_upload_none(self, transport):
        """Test None content is rejected."""
        async with ArchiveClient(transport=transport) as client:
            with pytest.raises(InvalidInputError):
                await client.upload(None, 'repo.tar.gz', '1234')
