"""
RecordEncoder for GP-102 POI files
Builds the 128-byte record written to the device
"""
import logging
import math
import struct
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from gp102_poi.poi_infrastructure import input_validator
from .errors import CoordinateOverflow, InvalidIconIndex
from .models.poi_icon import PoiIcon
from .models.poi_record import COORDINATE_FACTOR, NAME_SIZE, RECORD_SIGNATURE
from .record_decoder import RESERVED2_SIZE, TRAILER_SIZE

logger = logging.getLogger(__name__)

# Constant regions as written by the device itself
RESERVED1 = bytes([0x00, 0x00, 0x01]) + bytes(7)
RESERVED2 = bytes(RESERVED2_SIZE)
TRAILER = b'\xff' * TRAILER_SIZE

INT32_MIN = -0x80000000
INT32_MAX = 0x7FFFFFFF


def round_half_away_from_zero(value: float) -> int:
    """Round like C lround; Decimal holds the exact binary value of the float."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


class RecordEncoder:
    """
    Encodes POI records for the device
    """

    @staticmethod
    def encode(name: Union[str, bytes], latitude: float, longitude: float, icon_index: int = 0) -> bytes:
        """
        Encode a POI record.

        Args:
            name: POI name, restricted to ASCII letters, digits and - . : / _
            latitude: Signed degrees, negative south
            longitude: Signed degrees, negative west
            icon_index: Index into PoiIcon

        Returns:
            128-byte record

        Raises:
            UnsupportedNameCharacter: If name has a character the device cannot store
            InvalidIconIndex: If icon_index is outside the icon table
            CoordinateOverflow: If a coordinate does not fit the fixed-point field
        """
        name_bytes = input_validator.validate_poi_name(name)
        if len(name_bytes) > NAME_SIZE:
            logger.warning(f"POI name {name_bytes.decode('ascii')!r} truncated to {NAME_SIZE} characters")
            name_bytes = name_bytes[:NAME_SIZE]

        if not PoiIcon.is_valid(icon_index):
            raise InvalidIconIndex(icon_index, len(PoiIcon))

        raw_latitude = RecordEncoder._to_fixed_point('latitude', latitude)
        raw_longitude = RecordEncoder._to_fixed_point('longitude', longitude)

        record = RecordEncoder._build_record(name_bytes, icon_index, raw_latitude, raw_longitude)
        logger.debug(f"Encoded POI record: {record.hex().upper()}")
        return record

    @staticmethod
    def _to_fixed_point(field: str, degrees: float) -> int:
        """Scale degrees to the stored integer, rounding half away from zero."""
        scaled = degrees * COORDINATE_FACTOR
        if math.isnan(scaled) or not INT32_MIN - 1 < scaled < INT32_MAX + 1:
            raise CoordinateOverflow(field, degrees)
        value = round_half_away_from_zero(scaled)
        if not INT32_MIN <= value <= INT32_MAX:
            raise CoordinateOverflow(field, degrees)
        return value

    @staticmethod
    def _build_record(name_bytes: bytes, icon_index: int, raw_latitude: int, raw_longitude: int) -> bytes:
        """
        Build the complete record.

        Offsets: signature 0, icon 1, reserved1 2, name 12, reserved2 22,
        latitude 76, longitude 80, trailer 84.
        """
        record = bytearray()

        record.append(RECORD_SIGNATURE)
        record.append(icon_index)
        record.extend(RESERVED1)

        # Name (zero padded)
        record.extend(name_bytes.ljust(NAME_SIZE, b'\x00'))

        record.extend(RESERVED2)

        # Coordinates (4 bytes each, little-endian)
        record.extend(struct.pack('<i', raw_latitude))
        record.extend(struct.pack('<i', raw_longitude))

        record.extend(TRAILER)
        return bytes(record)


def encode_record(name: Union[str, bytes], latitude: float, longitude: float, icon_index: int = 0) -> bytes:
    return RecordEncoder.encode(name, latitude, longitude, icon_index)
