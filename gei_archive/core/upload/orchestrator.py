"""
Upload orchestrator.

Chooses between the single request and the chunked upload protocol based
on payload size.
"""
from typing import Any, Optional
from urllib.parse import quote

from ..api.config import UploadConfig
from ..exceptions import InvalidInputError, UploadFailedError, UploadPhase
from ..logging import get_logger
from .models import UploadProgress, UploadRequest
from .protocols import TransportProtocol, ProgressCallback
from .services import SingleShotUploader, ChunkedUploadSession
from .streams import ContentStream

logger = get_logger('gei_archive.upload')


def _escape(value: str) -> str:
    return quote(value, safe='')


class UploadOrchestrator:
    """
    Entry point of the upload core.
    
    Payloads larger than ``size_threshold`` use the chunked protocol,
    everything else is uploaded in one request. No retries are attempted.
    
    Example:
        >>> orchestrator = UploadOrchestrator(http_client)
        >>> locator = await orchestrator.upload(stream, "migration.tar.gz", "12345")
    """
    
    def __init__(
        self,
        transport: TransportProtocol,
        config: Optional[UploadConfig] = None,
        size_threshold: Optional[int] = None,
        progress_callback: Optional[ProgressCallback] = None
    ):
        """
        Initialize orchestrator.
        
        Args:
            transport: HTTP transport
            config: Upload configuration
            size_threshold: Overrides ``config.size_threshold``
            progress_callback: Optional callback for progress updates
        """
        config = config or UploadConfig()
        if size_threshold is not None:
            config = UploadConfig(size_threshold=size_threshold, base_url=config.base_url)
        
        self._config = config
        self._progress_callback = progress_callback
        self._single = SingleShotUploader(transport)
        self._chunked = ChunkedUploadSession(
            transport,
            part_size=config.size_threshold,
            base_url=config.base_url,
            progress_callback=progress_callback
        )
    
    @property
    def size_threshold(self) -> int:
        return self._config.size_threshold
    
    @property
    def base_url(self) -> str:
        return self._config.base_url
    
    def archive_url(self, owner_id: str) -> str:
        """URL of the owner's archive endpoint."""
        return f"{self.base_url.rstrip('/')}/organizations/{_escape(owner_id)}/gei/archive"
    
    def single_upload_url(self, owner_id: str, name: str) -> str:
        return f"{self.archive_url(owner_id)}?name={_escape(name)}"
    
    def multipart_upload_url(self, owner_id: str) -> str:
        return f"{self.archive_url(owner_id)}/blobs/uploads"
    
    async def upload(
        self,
        content: Any,
        name: str,
        owner_id: str,
        length: Optional[int] = None
    ) -> str:
        """
        Upload an archive.
        
        Args:
            content: Archive content (bytes, file object, aiofiles handle
                or ContentStream)
            name: Archive name
            owner_id: Organization database id
            length: Explicit content length, if the source can't report it
            
        Returns:
            Content locator of the uploaded archive
            
        Raises:
            InvalidInputError: If arguments are unusable (no network calls)
            UploadFailedError: If the upload fails
        """
        if content is None:
            raise InvalidInputError("The archive content stream cannot be null.")
        if not name:
            raise InvalidInputError("Archive name cannot be empty")
        if not owner_id:
            raise InvalidInputError("Owner id cannot be empty")
        
        stream = await ContentStream.create(content, length)
        request = UploadRequest(content=stream, name=name, owner_id=owner_id)
        return await self._dispatch(request)
    
    async def _dispatch(self, request: UploadRequest) -> str:
        stream: ContentStream = request.content
        size_mb = stream.length / (1024 * 1024)
        
        if stream.length > self.size_threshold:
            logger.debug(f"Using chunked upload for {request.name} ({size_mb:.2f} MB)")
            url = self.multipart_upload_url(request.owner_id)
            return await self._chunked.upload(stream, request.name, url)
        
        logger.debug(f"Using single request upload for {request.name} ({size_mb:.2f} MB)")
        url = self.single_upload_url(request.owner_id, request.name)
        locator = await self._single.upload(stream, url)
        if self._progress_callback:
            try:
                self._progress_callback(UploadProgress(
                    part_number=1,
                    total_parts=1,
                    bytes_uploaded=stream.length,
                    total_bytes=stream.length
                ))
            except Exception as e:
                raise UploadFailedError("Progress callback failed.", UploadPhase.SINGLE, e) from e
        return locator
