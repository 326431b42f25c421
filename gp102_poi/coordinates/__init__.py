"""Coordinate text parsing and formatting."""
from .errors import CoordinateParseError, MalformedNumber, MissingNumber, MissingHemisphere, TrailingGarbage
from .coordinate_parser import CoordinateParser, parse_coordinates
from .coordinate_formatter import format_coordinate, format_latitude, format_longitude, format_record

__all__ = [
    "CoordinateParseError", "MalformedNumber", "MissingNumber", "MissingHemisphere", "TrailingGarbage",
    "CoordinateParser", "parse_coordinates",
    "format_coordinate", "format_latitude", "format_longitude", "format_record",
]
