"""
Content stream adapters.

Wraps the supported content sources behind one async, length-aware reader.
"""
import inspect
import io
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Optional, Union

import aiofiles

from ..exceptions import InvalidInputError
from ..logging import get_logger

DEFAULT_READ_SIZE = 1024 * 1024  # 1MB

logger = get_logger('gei_archive.upload')


async def _resolve(value: Any) -> Any:
    """Await ``value`` if the source returned an awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


class ContentStream:
    """
    Forward-only reader over an upload source with a known length.
    
    Supported sources:
    - bytes, bytearray and memoryview
    - objects with a synchronous ``read(size)`` (BytesIO, binary files)
    - objects with an asynchronous ``read(size)`` (aiofiles handles)
    
    Reads never go past ``length`` bytes, measured from the position the
    source had when it was wrapped.
    """
    
    def __init__(self, source: Any, length: int):
        """
        Initialize stream.
        
        Args:
            source: Object with a sync or async ``read(size)``
            length: Number of bytes to read from the source
        """
        if length < 0:
            raise InvalidInputError(f"Content length cannot be negative: {length}")
        self._source = source
        self._length = length
        self._consumed = 0
    
    @property
    def length(self) -> int:
        """Total number of bytes in the stream."""
        return self._length
    
    @property
    def consumed(self) -> int:
        """Number of bytes read so far."""
        return self._consumed
    
    @property
    def remaining(self) -> int:
        """Number of bytes left to read."""
        return self._length - self._consumed
    
    @classmethod
    async def create(cls, source: Any, length: Optional[int] = None) -> 'ContentStream':
        """
        Wrap a content source.
        
        Args:
            source: Content to upload
            length: Explicit length; measured from the source if omitted
            
        Returns:
            ContentStream over the source
            
        Raises:
            InvalidInputError: If source is None, unreadable, or its length
                cannot be determined
        """
        if source is None:
            raise InvalidInputError("The archive content stream cannot be null.")
        
        if isinstance(source, ContentStream):
            if length is None or length == source.length:
                return source
            return cls(source, length)
        
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(source)
        
        if not callable(getattr(source, 'read', None)):
            raise InvalidInputError(
                f"Unsupported content type: {type(source).__name__}"
            )
        
        if length is None:
            length = await cls._measure(source)
        
        return cls(source, length)
    
    @staticmethod
    async def _measure(source: Any) -> int:
        """Measure bytes left between the current position and the end."""
        if hasattr(source, 'getbuffer'):
            return len(source.getbuffer()) - source.tell()
        
        if not (hasattr(source, 'seek') and hasattr(source, 'tell')):
            raise InvalidInputError(
                "Content length cannot be determined; pass length explicitly"
            )
        
        try:
            position = await _resolve(source.tell())
            end = await _resolve(source.seek(0, io.SEEK_END))
            await _resolve(source.seek(position))
        except (OSError, ValueError) as e:
            raise InvalidInputError(
                f"Content length cannot be determined: {e}"
            ) from e
        
        return end - position
    
    async def read(self, size: int) -> bytes:
        """
        Read up to ``size`` bytes.
        
        Returns:
            The bytes read, or b"" at end of stream
        """
        to_read = min(size, self.remaining)
        if to_read <= 0:
            return b""
        
        data = await _resolve(self._source.read(to_read))
        if not data:
            return b""
        
        self._consumed += len(data)
        return data
    
    async def iter_chunks(self, chunk_size: int = DEFAULT_READ_SIZE) -> AsyncIterator[bytes]:
        """Yield the remaining content in pieces of at most ``chunk_size``."""
        while True:
            data = await self.read(chunk_size)
            if not data:
                break
            yield data


@asynccontextmanager
async def open_archive(file_path: Union[str, Path]) -> AsyncIterator[ContentStream]:
    """
    Open an archive file for upload.
    
    Args:
        file_path: Path to the archive
        
    Yields:
        ContentStream sized from the file's stat
        
    Raises:
        FileNotFoundError: If file doesn't exist
        InvalidInputError: If path is not a regular file
    """
    path = Path(file_path) if isinstance(file_path, str) else file_path
    
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    
    if not path.is_file():
        raise InvalidInputError(f"Path is not a file: {path}")
    
    file_size = path.stat().st_size
    logger.debug(f"Opening archive {path} ({file_size} bytes)")
    
    async with aiofiles.open(path, 'rb') as handle:
        yield ContentStream(handle, file_size)
