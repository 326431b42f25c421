"""Formatting of degrees as hemisphere, degrees and decimal minutes."""
from gp102_poi.poi_codec.models.poi_record import PoiRecord

LATITUDE_WIDTH = 2
LONGITUDE_WIDTH = 3


def format_coordinate(value: float, width: int, hemispheres: str) -> str:
    """
    Format signed degrees, e.g. 48.50417 -> "N 48° 30.250".

    Args:
        value: Signed degrees
        width: Zero-padded width of the degree field
        hemispheres: Letters for positive and negative values, e.g. "NS"
    """
    degrees = int(abs(value))
    minutes = (abs(value) - degrees) * 60
    return f"{hemispheres[1 if value < 0 else 0]} {degrees:0{width}d}° {minutes:06.3f}"


def format_latitude(value: float) -> str:
    return format_coordinate(value, LATITUDE_WIDTH, "NS")


def format_longitude(value: float) -> str:
    return format_coordinate(value, LONGITUDE_WIDTH, "EW")


def format_record(record: PoiRecord) -> str:
    """One output line: "<name> (<icon>) <lat> <lon>"."""
    return (f"{record.display_name} ({record.icon_name}) "
            f"{format_latitude(record.latitude)} {format_longitude(record.longitude)}")
