"""POI record model."""
from dataclasses import dataclass

from .poi_icon import PoiIcon


# Fixed-point scale of the latitude/longitude fields
COORDINATE_FACTOR = 100000.0

RECORD_SIGNATURE = 0x01
NAME_SIZE = 10


@dataclass
class PoiRecord:
    """
    Single GP-102 POI record.

    Record Structure (128 bytes, little-endian):
    - Signature: 1 byte (always 0x01)
    - Icon: 1 byte (index into PoiIcon)
    - Reserved 1: 10 bytes (0x00 0x00 0x01 followed by zeros)
    - Name: 10 bytes (not necessarily NUL terminated)
    - Reserved 2: 54 bytes (zeros)
    - Latitude: 4 bytes (signed, degrees x 100000)
    - Longitude: 4 bytes (signed, degrees x 100000)
    - Trailer: 44 bytes (0xFF)
    """
    signature: int
    icon_index: int
    name: bytes
    latitude: float  # Degrees, negative south
    longitude: float  # Degrees, negative west
    raw_latitude: int
    raw_longitude: int
    reserved1: bytes = b""
    reserved2: bytes = b""
    trailer: bytes = b""

    @property
    def icon(self) -> PoiIcon:
        return PoiIcon(self.icon_index)

    @property
    def icon_name(self) -> str:
        return self.icon.label

    @property
    def has_valid_signature(self) -> bool:
        """Check if the signature byte has the expected value."""
        return self.signature == RECORD_SIGNATURE

    @property
    def display_name(self) -> str:
        """Name bytes up to the first NUL, as text."""
        return self.name.split(b"\x00", 1)[0].decode("ascii", errors="replace")

    @staticmethod
    def create(signature: int, icon_index: int, name: bytes, raw_latitude: int, raw_longitude: int,
               reserved1: bytes = b"", reserved2: bytes = b"", trailer: bytes = b"") -> 'PoiRecord':
        """Create a POI record from raw field values."""
        return PoiRecord(
            signature=signature,
            icon_index=icon_index,
            name=name,
            latitude=raw_latitude / COORDINATE_FACTOR,
            longitude=raw_longitude / COORDINATE_FACTOR,
            raw_latitude=raw_latitude,
            raw_longitude=raw_longitude,
            reserved1=reserved1,
            reserved2=reserved2,
            trailer=trailer
        )
