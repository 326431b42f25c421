"""
gp102-poi - read and write GP-102 GPS tracker POI files

Library:
    from gp102_poi import decode_file, encode_record, parse_coordinates
    lat, lon = parse_coordinates("N 48° 30' 15\\" E 2° 20' 0\\"")
    data = encode_record("trip-01", lat, lon)
"""
from gp102_poi.poi_codec import (
    PoiError, DecodeError, EncodeError, PoiIcon, PoiRecord, RECORD_SIZE,
    decode_record, decode_stream, decode_file, encode_record,
)
from gp102_poi.coordinates import CoordinateParseError, parse_coordinates, format_record

__version__ = "1.0.0"
__all__ = [
    "PoiError", "DecodeError", "EncodeError", "PoiIcon", "PoiRecord", "RECORD_SIZE",
    "decode_record", "decode_stream", "decode_file", "encode_record",
    "CoordinateParseError", "parse_coordinates", "format_record",
]
