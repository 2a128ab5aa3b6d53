"""
Chunked upload service.

Implements the three phase blob upload protocol of GitHub owned storage:
start, one PATCH per part, and a final PUT.
"""
import math
import time
from typing import Optional

from ...exceptions import UploadFailedError, UploadPhase
from ...logging import get_logger
from ..buffer import ChunkBuffer, Chunk
from ..location import get_next_url, extract_session_guid
from ..models import UploadSession, UploadProgress, archive_locator
from ..protocols import TransportProtocol, ProgressCallback
from ..streams import ContentStream

OCTET_STREAM = 'application/octet-stream'


class ChunkedUploadSession:
    """
    Uploads an archive as a chain of parts.
    
    Every response carries a Location header pointing at the URL for the
    next request; the first one also carries the session guid that names
    the archive.
    
    Each instance keeps no state between calls; the buffer and session
    live for one ``upload`` call only.
    """
    
    def __init__(
        self,
        transport: TransportProtocol,
        part_size: int,
        base_url: str,
        progress_callback: Optional[ProgressCallback] = None
    ):
        """
        Initialize chunked uploader.
        
        Args:
            transport: HTTP transport
            part_size: Size of every part but the last one
            base_url: Base URL Location headers resolve against
            progress_callback: Optional callback for progress updates
        """
        self._transport = transport
        self._part_size = part_size
        self._base_url = base_url
        self._progress_callback = progress_callback
        self._logger = get_logger('gei_archive.upload.chunked')
    
    async def upload(self, content: ContentStream, name: str, start_url: str) -> str:
        """
        Upload the stream as multiple parts.
        
        Args:
            content: Archive content
            name: Archive name
            start_url: URL that starts the upload session
            
        Returns:
            Content locator ``gei://archive/{guid}``
            
        Raises:
            UploadFailedError: If any phase fails; ``phase`` names it
        """
        buffer = ChunkBuffer(self._part_size)
        session: Optional[UploadSession] = None
        
        try:
            session = await self._start(start_url, name, content.length)
            await self._upload_parts(buffer, content, session)
            await self._complete(session)
        except UploadFailedError as e:
            guid = session.session_guid if session else None
            self._logger.warning(
                f"Multipart upload failed during {e.phase.value} phase"
                + (f"; upload session {guid} was left incomplete" if guid else "")
            )
            raise
        
        return archive_locator(session.session_guid)
    
    async def _start(self, start_url: str, name: str, size: int) -> UploadSession:
        """Start the upload session and capture the first part URL."""
        self._logger.info(f"Starting archive upload into GitHub owned storage: {name}...")
        
        body = {'content_type': OCTET_STREAM, 'name': name, 'size': size}
        
        try:
            _, headers = await self._transport.post_with_full_response(start_url, body)
            next_url = get_next_url(headers, self._base_url)
            guid = extract_session_guid(next_url)
        except Exception as e:
            raise UploadFailedError("Failed to start upload.", UploadPhase.START, e) from e
        
        self._logger.debug(f"Upload session {guid} started")
        return UploadSession(
            session_guid=guid,
            next_url=next_url,
            total_parts=math.ceil(size / self._part_size)
        )
    
    async def _upload_parts(
        self,
        buffer: ChunkBuffer,
        content: ContentStream,
        session: UploadSession
    ) -> None:
        """Upload parts until the stream is exhausted."""
        while True:
            try:
                chunk = await buffer.fill(content)
            except Exception as e:
                raise UploadFailedError(
                    "Failed to read archive content.", UploadPhase.PART, e,
                    part_number=session.parts_uploaded + 1
                ) from e
            if not chunk:
                break
            session.next_url = await self._upload_part(chunk, session)
            session.parts_uploaded += 1
            session.bytes_uploaded += len(chunk)
            try:
                self._report_progress(session, content.length)
            except Exception as e:
                raise UploadFailedError(
                    "Progress callback failed.", UploadPhase.PART, e,
                    part_number=session.parts_uploaded
                ) from e
        
        if session.bytes_uploaded != content.length:
            self._logger.warning(
                f"Stream ended after {session.bytes_uploaded} of {content.length} bytes"
            )
    
    async def _upload_part(self, chunk: Chunk, session: UploadSession) -> str:
        """Upload one part and return the URL for the next request."""
        part_number = session.parts_uploaded + 1
        self._logger.info(f"Uploading part {part_number}/{session.total_parts}...")
        part_start = time.time()
        
        try:
            _, headers = await self._transport.patch_with_full_response(
                session.next_url, chunk.data
            )
            next_url = get_next_url(headers, self._base_url)
        except Exception as e:
            raise UploadFailedError(
                "Failed to upload part.", UploadPhase.PART, e, part_number=part_number
            ) from e
        
        elapsed = time.time() - part_start
        chunk_size_mb = len(chunk) / (1024 * 1024)
        self._logger.debug(f"Part {part_number} uploaded in {elapsed:.2f}s ({chunk_size_mb:.2f} MB)")
        return next_url
    
    async def _complete(self, session: UploadSession) -> None:
        """Finalize the upload session."""
        try:
            await self._transport.put(session.next_url, "")
        except Exception as e:
            raise UploadFailedError("Failed to complete upload.", UploadPhase.COMPLETE, e) from e
        
        self._logger.info("Finished uploading archive")
    
    def _report_progress(self, session: UploadSession, total_bytes: int) -> None:
        if self._progress_callback is None:
            return
        self._progress_callback(UploadProgress(
            part_number=session.parts_uploaded,
            total_parts=session.total_parts,
            bytes_uploaded=session.bytes_uploaded,
            total_bytes=total_bytes
        ))
