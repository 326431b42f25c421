"""
Input validation for values written to the device
"""
import logging
import re
import string
from typing import Union

from gp102_poi.poi_codec.errors import UnsupportedNameCharacter

logger = logging.getLogger(__name__)

# POI name validation: ASCII letters, digits and the separators the device can display
POI_NAME_CHARSET = string.ascii_letters + string.digits + '-.:/_'
POI_NAME_PATTERN = re.compile(r'[A-Za-z0-9\-.:/_]*')


def validate_poi_name(name: Union[str, bytes]) -> bytes:
    """
    Validate a POI name against the device character set.

    Args:
        name: Name as text or raw bytes

    Returns:
        Name as ASCII bytes (not truncated)

    Raises:
        UnsupportedNameCharacter: On the first character outside the allowed set
    """
    text = name.decode('latin-1') if isinstance(name, (bytes, bytearray)) else str(name)

    if not POI_NAME_PATTERN.fullmatch(text):
        index, character = next((i, c) for i, c in enumerate(text) if c not in POI_NAME_CHARSET)
        logger.debug(f"Rejected POI name {text!r}: {character!r} at {index}")
        raise UnsupportedNameCharacter(character, index)

    return text.encode('ascii')

