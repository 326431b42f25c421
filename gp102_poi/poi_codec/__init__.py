"""GP-102 POI record codec."""
from .errors import (
    PoiError, DecodeError, EncodeError, TruncatedInput, UnexpectedSize,
    InvalidIconIndex, UnsupportedNameCharacter, CoordinateOverflow,
)
from .models.poi_icon import PoiIcon, ICON_NAMES
from .models.poi_record import PoiRecord, COORDINATE_FACTOR
from .record_decoder import RECORD_SIZE, RecordDecoder, decode_record, decode_stream, decode_file
from .record_encoder import RecordEncoder, encode_record

__all__ = [
    "PoiError", "DecodeError", "EncodeError", "TruncatedInput", "UnexpectedSize",
    "InvalidIconIndex", "UnsupportedNameCharacter", "CoordinateOverflow",
    "PoiIcon", "ICON_NAMES", "PoiRecord", "COORDINATE_FACTOR",
    "RECORD_SIZE", "RecordDecoder", "decode_record", "decode_stream", "decode_file",
    "RecordEncoder", "encode_record",
]
