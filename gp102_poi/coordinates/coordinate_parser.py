"""
Parser for latitude/longitude pairs in degree, minute, second notation.

Accepted input, latitude first:
    N 48° 30' 15" E 2° 20' 0"
    48.5075 N, 2.3333 E
    S 33 52.5; E 151 12.6

Each coordinate is one to three numbers (degrees, minutes, seconds), each
optionally followed by its unit glyph, and exactly one hemisphere letter
either before the first number or after any of them. The two coordinates
may be separated by a single ',' or ';'.
"""
import logging
import re
from typing import Optional, Tuple

from .cursor import Cursor
from .errors import MalformedNumber, MissingHemisphere, MissingNumber, TrailingGarbage

logger = logging.getLogger(__name__)

LATITUDE_HEMISPHERES = "NS"
LONGITUDE_HEMISPHERES = "EW"

# Unit glyph for degrees, minutes and seconds, in this order
UNITS = ("°", "'", '"')
SEPARATORS = ",;"

DIGITS = "0123456789"
NUMBER_CHARS = DIGITS + "."
MAX_NUMBER_LENGTH = 14
NUMBER_PATTERN = re.compile(r'[0-9]+(?:\.[0-9]*)?')


class CoordinateParser:
    """Recursive-descent parser for one "latitude longitude" string."""

    def __init__(self, text: str):
        if text is None:
            raise ValueError("text cannot be None")
        self._cursor = Cursor(text)

    @property
    def position(self) -> int:
        return self._cursor.position

    def parse(self) -> Tuple[float, float]:
        """
        Parse the whole text.

        Returns:
            (latitude, longitude) in signed degrees

        Raises:
            CoordinateParseError: With the position where parsing stopped
        """
        latitude = self._parse_coordinate(LATITUDE_HEMISPHERES)
        self._parse_separator()
        longitude = self._parse_coordinate(LONGITUDE_HEMISPHERES)
        self._parse_end()
        logger.debug(f"Parsed {self._cursor.text!r} as lat={latitude}, lon={longitude}")
        return latitude, longitude

    def _parse_coordinate(self, hemispheres: str) -> float:
        cursor = self._cursor
        cursor.skip_whitespace()
        hemisphere = self._parse_hemisphere(hemispheres)

        parts = []
        for unit in UNITS:
            value = self._parse_part(unit, required=not parts)
            if value is None:
                break
            parts.append(value)

            if hemisphere is None:
                hemisphere = self._parse_hemisphere(hemispheres)
            elif cursor.peek() and cursor.peek() in hemispheres:
                # A second hemisphere letter belongs to whatever follows
                break

        if hemisphere is None:
            raise MissingHemisphere(cursor.text, cursor.position,
                                    f"expected {' or '.join(hemispheres)}")

        degrees = parts[0]
        minutes = parts[1] if len(parts) > 1 else 0.0
        seconds = parts[2] if len(parts) > 2 else 0.0
        value = degrees + minutes / 60.0 + seconds / 3600.0
        return -value if hemisphere == 1 else value

    def _parse_hemisphere(self, hemispheres: str) -> Optional[int]:
        """Consume a hemisphere letter; returns 0 for N/E, 1 for S/W, None if absent."""
        letter = self._cursor.peek()
        if letter and letter in hemispheres:
            self._cursor.advance()
            return hemispheres.index(letter)
        return None

    def _parse_part(self, unit: str, required: bool) -> Optional[float]:
        """Parse one number with its optional unit glyph; None when no number follows."""
        cursor = self._cursor
        cursor.skip_whitespace()
        if cursor.peek() == "" or cursor.peek() not in DIGITS:
            if required:
                raise MissingNumber(cursor.text, cursor.position)
            return None

        value = self._parse_number()
        cursor.skip_whitespace()
        cursor.consume(unit)
        cursor.skip_whitespace()
        return value

    def _parse_number(self) -> float:
        cursor = self._cursor
        start = cursor.position
        token = cursor.take_while(NUMBER_CHARS)

        if len(token) > MAX_NUMBER_LENGTH:
            raise MalformedNumber(cursor.text, start + MAX_NUMBER_LENGTH,
                                  f"more than {MAX_NUMBER_LENGTH} characters")

        match = NUMBER_PATTERN.match(token)
        if match.end() != len(token):
            raise MalformedNumber(cursor.text, start + match.end(), repr(token))

        return float(token)

    def _parse_separator(self) -> None:
        self._cursor.skip_whitespace()
        if self._cursor.peek() and self._cursor.peek() in SEPARATORS:
            self._cursor.advance()

    def _parse_end(self) -> None:
        self._cursor.skip_whitespace()
        if not self._cursor.at_end:
            raise TrailingGarbage(self._cursor.text, self._cursor.position)


def parse_coordinates(text: str) -> Tuple[float, float]:
    """Parse "latitude longitude" text into signed degrees."""
    return CoordinateParser(text).parse()
