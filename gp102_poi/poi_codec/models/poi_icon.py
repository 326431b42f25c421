"""POI icon enumeration."""
from enum import IntEnum


class PoiIcon(IntEnum):
    """Icons known to the device, in on-disk index order."""
    STAR = 0
    HOME = 1
    CHECKPOINT = 2
    CAR = 3
    CAFE = 4
    TRAIN = 5
    GAS = 6
    OFFICE = 7
    AIRPORT = 8

    @property
    def label(self) -> str:
        """Name shown to the user (lower case)."""
        return self.name.lower()

    @classmethod
    def is_valid(cls, index: int) -> bool:
        """Check if index is a known icon."""
        return 0 <= index < len(cls)


ICON_NAMES = tuple(icon.label for icon in PoiIcon)
