"""Exceptions raised by the coordinate parser."""
from gp102_poi.poi_codec.errors import PoiError


class CoordinateParseError(PoiError):
    """Coordinate text could not be parsed; position is where parsing stopped."""

    reason = "invalid coordinates"

    def __init__(self, text: str, position: int, detail: str = ""):
        message = f"{self.reason} at position {position}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.text = text
        self.position = position

    @property
    def byte_offset(self) -> int:
        """Position as a UTF-8 byte offset into the text."""
        return len(self.text[:self.position].encode("utf-8"))

    def caret(self) -> str:
        """Input text with a caret under the failing position."""
        return f"{self.text}\n{' ' * self.position}^"


class MalformedNumber(CoordinateParseError):
    reason = "malformed number"


class MissingNumber(CoordinateParseError):
    reason = "expected a number"


class MissingHemisphere(CoordinateParseError):
    reason = "missing hemisphere"


class TrailingGarbage(CoordinateParseError):
    reason = "unexpected characters after coordinates"
