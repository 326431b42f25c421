"""Binary reader for little-endian record fields."""
import io
import struct
from typing import BinaryIO


class LittleEndianBinaryReader:
    """Binary reader for the little-endian POI record layout."""

    def __init__(self, stream: BinaryIO):
        """Initialize with a bytes stream."""
        self._stream = stream

    @classmethod
    def from_bytes(cls, data: bytes) -> 'LittleEndianBinaryReader':
        return cls(io.BytesIO(data))

    def read_byte(self) -> int:
        """Read a single unsigned byte."""
        return struct.unpack('<B', self._stream.read(1))[0]

    def read_int32(self) -> int:
        """Read a signed little-endian int32."""
        return struct.unpack('<i', self._stream.read(4))[0]

    def read_bytes(self, count: int) -> bytes:
        """Read specified number of bytes."""
        return self._stream.read(count)
