"""
Reusable chunk buffer.

One buffer is allocated per chunked upload and refilled for every part.
"""
from dataclasses import dataclass

from ..exceptions import InvalidInputError
from .streams import ContentStream


@dataclass(frozen=True)
class Chunk:
    """
    A filled region of a ChunkBuffer.
    
    Only the first ``valid_length`` bytes of ``buffer`` belong to this
    chunk; anything after them is left over from an earlier, longer read.
    """
    buffer: bytearray
    valid_length: int
    
    @property
    def data(self) -> memoryview:
        """View over the valid bytes only."""
        return memoryview(self.buffer)[:self.valid_length]
    
    def __len__(self) -> int:
        return self.valid_length
    
    def __bool__(self) -> bool:
        return self.valid_length > 0


class ChunkBuffer:
    """Fixed-capacity byte buffer filled sequentially from a ContentStream."""
    
    def __init__(self, capacity: int):
        """
        Initialize buffer.
        
        Args:
            capacity: Size of the buffer in bytes
        """
        if capacity <= 0:
            raise InvalidInputError("Chunk buffer capacity must be positive")
        self._buffer = bytearray(capacity)
    
    @property
    def capacity(self) -> int:
        """Buffer capacity in bytes."""
        return len(self._buffer)
    
    async def fill(self, stream: ContentStream) -> Chunk:
        """
        Read from ``stream`` until the buffer is full or the stream ends.
        
        Short reads are retried, so every chunk but the last one is
        exactly ``capacity`` bytes long.
        
        Returns:
            Chunk with the number of bytes actually read
        """
        filled = 0
        with memoryview(self._buffer) as view:
            while filled < self.capacity:
                data = await stream.read(self.capacity - filled)
                if not data:
                    break
                view[filled:filled + len(data)] = data
                filled += len(data)
        return Chunk(self._buffer, filled)
