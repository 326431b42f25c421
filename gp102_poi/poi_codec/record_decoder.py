"""Decoder for GP-102 POI files."""
import logging
import os
from typing import BinaryIO, Union

from .binary_reader import LittleEndianBinaryReader
from .errors import InvalidIconIndex, TruncatedInput, UnexpectedSize
from .models.poi_icon import PoiIcon
from .models.poi_record import NAME_SIZE, PoiRecord

logger = logging.getLogger(__name__)

RECORD_SIZE = 128
RESERVED1_SIZE = 10
RESERVED2_SIZE = 54
TRAILER_SIZE = 44


class RecordDecoder:
    """Decoder for a single 128-byte POI record."""

    def __init__(self, reader: LittleEndianBinaryReader):
        """Initialize decoder with a binary reader positioned at the record start."""
        if reader is None:
            raise ValueError("reader cannot be None")
        self._reader = reader

    def decode(self) -> PoiRecord:
        """
        Decode the record fields.

        Returns:
            PoiRecord with coordinates converted to degrees

        Raises:
            InvalidIconIndex: If the icon byte is outside the icon table
        """
        signature = self._reader.read_byte()
        icon_index = self._reader.read_byte()
        reserved1 = self._reader.read_bytes(RESERVED1_SIZE)
        name = self._reader.read_bytes(NAME_SIZE)
        reserved2 = self._reader.read_bytes(RESERVED2_SIZE)
        latitude = self._reader.read_int32()
        longitude = self._reader.read_int32()
        trailer = self._reader.read_bytes(TRAILER_SIZE)

        if not PoiIcon.is_valid(icon_index):
            raise InvalidIconIndex(icon_index, len(PoiIcon))

        record = PoiRecord.create(signature, icon_index, name, latitude, longitude,
                                  reserved1=reserved1, reserved2=reserved2, trailer=trailer)
        logger.debug(f"Decoded POI record: name={record.name!r}, icon={record.icon_name}, "
                     f"lat={record.raw_latitude}, lon={record.raw_longitude}")
        return record


def read_record_bytes(stream: BinaryIO) -> bytes:
    """
    Read exactly one record from a stream.

    Raises:
        TruncatedInput: If the stream ends before RECORD_SIZE bytes
        UnexpectedSize: If the stream has data after the record
    """
    data = stream.read(RECORD_SIZE)
    if len(data) < RECORD_SIZE:
        raise TruncatedInput(len(data), RECORD_SIZE)
    if stream.read(1):
        raise UnexpectedSize(RECORD_SIZE)
    return data


def decode_record(data: bytes) -> PoiRecord:
    """Decode a complete 128-byte buffer."""
    if len(data) < RECORD_SIZE:
        raise TruncatedInput(len(data), RECORD_SIZE)
    if len(data) > RECORD_SIZE:
        raise UnexpectedSize(RECORD_SIZE)
    return RecordDecoder(LittleEndianBinaryReader.from_bytes(data)).decode()


def decode_stream(stream: BinaryIO) -> PoiRecord:
    return decode_record(read_record_bytes(stream))


def decode_file(path: Union[str, os.PathLike]) -> PoiRecord:
    """
    Decode a POI file.

    The file handle is closed before validation so every exit path releases it.
    OSError from open/read propagates unchanged.
    """
    with open(path, 'rb') as f:
        data = read_record_bytes(f)
    return decode_record(data)
