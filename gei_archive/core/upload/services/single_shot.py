"""
Single request upload service.

Uploads payloads that fit under the size threshold in one POST.
"""
import json
import time

from ...exceptions import UploadFailedError, UploadPhase
from ...logging import get_logger
from ..protocols import TransportProtocol
from ..streams import ContentStream


class SingleShotUploader:
    """
    Uploads an entire archive with one request.
    
    Responsibilities:
    - Send the content as an octet-stream body
    - Extract the ``uri`` of the stored archive from the JSON response
    """
    
    def __init__(self, transport: TransportProtocol):
        """
        Initialize uploader.
        
        Args:
            transport: HTTP transport
        """
        self._transport = transport
        self._logger = get_logger('gei_archive.upload.single')
    
    async def upload(self, content: ContentStream, url: str) -> str:
        """
        Upload the whole stream.
        
        Args:
            content: Archive content
            url: Upload URL including the ``name`` query parameter
            
        Returns:
            URI of the uploaded archive
            
        Raises:
            UploadFailedError: If the request fails or the response has no uri
        """
        size_mb = content.length / (1024 * 1024)
        self._logger.debug(f"Uploading archive in a single request ({size_mb:.2f} MB)")
        upload_start = time.time()
        
        try:
            response = await self._transport.post(url, content)
        except Exception as e:
            self._logger.error(f"Single request upload failed after {time.time() - upload_start:.2f}s: {e}")
            raise UploadFailedError("Failed to upload archive.", UploadPhase.SINGLE, e) from e
        
        uri = self._parse_uri(response)
        self._logger.debug(f"Archive uploaded in {time.time() - upload_start:.2f}s: {uri}")
        return uri
    
    def _parse_uri(self, response: str) -> str:
        """
        Extract ``uri`` from the response body.
        
        Raises:
            UploadFailedError: If the body is not a JSON object with a uri
        """
        try:
            data = json.loads(response)
        except (TypeError, ValueError) as e:
            raise UploadFailedError(
                "Upload response is not valid JSON.", UploadPhase.SINGLE, e
            ) from e
        
        uri = data.get('uri') if isinstance(data, dict) else None
        if not uri or not isinstance(uri, str):
            raise UploadFailedError("Upload response has no uri.", UploadPhase.SINGLE)
        
        return uri
