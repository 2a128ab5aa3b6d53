"""
High-level archive client.

Owns the HTTP transport and exposes the upload operations.
"""
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional, Union

from .core.api import AsyncHttpClient, APIConfig, UploadConfig
from .core.logging import get_logger
from .core.upload import UploadOrchestrator, ProgressCallback, open_archive

logger = get_logger('gei_archive')


class ArchiveClient:
    """
    Client for uploading migration archives to GitHub owned storage.
    
    Example:
        >>> async with ArchiveClient(token="ghp_...") as client:
        ...     locator = await client.upload_file("repo.tar.gz", "12345")
        ...     print(locator)
    """
    
    def __init__(
        self,
        token: Optional[str] = None,
        config: Optional[APIConfig] = None,
        size_threshold: Optional[int] = None,
        progress_callback: Optional[ProgressCallback] = None,
        transport: Optional[AsyncHttpClient] = None
    ):
        """
        Initialize client.
        
        Args:
            token: Access token sent as a Bearer Authorization header
            config: HTTP client configuration
            size_threshold: Optional override of the chunked upload threshold
            progress_callback: Optional callback for progress updates
            transport: Optional pre-built transport (config/token ignored)
        """
        self._config = config or APIConfig.default()
        if token:
            self._config = replace(self._config, token=token)
        self._http = transport or AsyncHttpClient(self._config)
        upload_config = UploadConfig(base_url=self._config.base_url)
        self._orchestrator = UploadOrchestrator(
            self._http,
            config=upload_config,
            size_threshold=size_threshold,
            progress_callback=progress_callback
        )
    
    @property
    def orchestrator(self) -> UploadOrchestrator:
        return self._orchestrator
    
    async def __aenter__(self) -> 'ArchiveClient':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
    
    async def close(self):
        """Close the HTTP transport."""
        await self._http.close()
    
    async def upload(
        self,
        content: Any,
        name: str,
        owner_id: str,
        length: Optional[int] = None
    ) -> str:
        """
        Upload archive content.
        
        Returns:
            Opaque content locator of the uploaded archive
        """
        return await self._orchestrator.upload(content, name, owner_id, length=length)
    
    async def upload_file(
        self,
        file_path: Union[str, Path],
        owner_id: str,
        name: Optional[str] = None
    ) -> str:
        """
        Upload an archive file.
        
        Args:
            file_path: Path to the archive
            owner_id: Organization database id
            name: Archive name (defaults to the file name)
            
        Returns:
            Opaque content locator of the uploaded archive
        """
        path = Path(file_path) if isinstance(file_path, str) else file_path
        async with open_archive(path) as stream:
            logger.info(f"Uploading {path.name} ({stream.length / (1024 * 1024):.2f} MB)")
            return await self._orchestrator.upload(stream, name or path.name, owner_id)
