"""Exceptions raised by the POI record codec."""


class PoiError(Exception):
    """Base class for all gp102-poi errors."""


class DecodeError(PoiError):
    """A POI file could not be decoded."""


class EncodeError(PoiError):
    """A POI record could not be encoded."""


class TruncatedInput(DecodeError):
    """Fewer than RECORD_SIZE bytes were available."""

    def __init__(self, size: int, expected: int):
        super().__init__(f"expected {expected} bytes, got {size}")
        self.size = size
        self.expected = expected


class UnexpectedSize(DecodeError):
    """More than RECORD_SIZE bytes were available."""

    def __init__(self, expected: int):
        super().__init__(f"input is larger than {expected} bytes")
        self.expected = expected


class InvalidIconIndex(DecodeError, EncodeError):
    """Icon index outside of the icon table."""

    def __init__(self, icon_index: int, icon_count: int):
        super().__init__(f"icon index {icon_index} out of range 0..{icon_count - 1}")
        self.icon_index = icon_index


class UnsupportedNameCharacter(EncodeError):
    """POI name contains a character the device cannot store."""

    def __init__(self, character: str, index: int):
        super().__init__(f"unsupported character {character!r} at position {index} in name")
        self.character = character
        self.index = index


class CoordinateOverflow(EncodeError):
    """Fixed-point coordinate does not fit into a signed 32-bit field."""

    def __init__(self, field: str, value: float):
        super().__init__(f"{field} {value} does not fit the record format")
        self.field = field
        self.value = value
