import pytest

from gp102_poi.coordinates import (
    CoordinateParseError, CoordinateParser, MalformedNumber, MissingHemisphere, MissingNumber,
    TrailingGarbage, parse_coordinates,
)

DMS = "N 48° 30' 15\" E 2° 20' 0\""


def test_dms_with_leading_hemisphere():
    lat, lon = parse_coordinates(DMS)
    assert lat == pytest.approx(48.50417, abs=1e-5)
    assert lon == pytest.approx(2.33333, abs=1e-5)


def test_decimal_degrees_with_trailing_hemisphere():
    lat, lon = parse_coordinates("48.5075 N, 2.3333 E")
    assert lat == pytest.approx(48.5075)
    assert lon == pytest.approx(2.3333)

    dms_lat, dms_lon = parse_coordinates(DMS)
    lat, lon = parse_coordinates("48.50417 N, 2.33333 E")
    assert lat == pytest.approx(dms_lat, abs=1e-5)
    assert lon == pytest.approx(dms_lon, abs=1e-5)


def test_south_and_west_are_negative():
    lat, lon = parse_coordinates("S 33 52.5; W 151 12.6")
    assert lat == pytest.approx(-33.875)
    assert lon == pytest.approx(-151.21)


def test_hemisphere_after_any_part():
    assert parse_coordinates("48 30 N, 2 20 E") == pytest.approx((48.5, 2 + 20 / 60))
    assert parse_coordinates("48° N 30', 2° E 20'") == pytest.approx((48.5, 2 + 20 / 60))
    assert parse_coordinates("48 30 0 S, 2 20 0 W") == pytest.approx((-48.5, -(2 + 20 / 60)))


def test_compact_and_spaced_forms():
    assert parse_coordinates("N48°30'E2°20'") == pytest.approx((48.5, 2 + 20 / 60))
    assert parse_coordinates("  N 48   E 2  \n") == pytest.approx((48.0, 2.0))
    assert parse_coordinates("N 48. E 2") == pytest.approx((48.0, 2.0))


def test_second_hemisphere_letter_stops_coordinate():
    with pytest.raises(CoordinateParseError) as exc_info:
        parse_coordinates("N 48 S")
    assert isinstance(exc_info.value, MissingNumber)
    assert exc_info.value.position == 5
    assert exc_info.value.caret() == "N 48 S\n     ^"


def test_trailing_garbage():
    with pytest.raises(TrailingGarbage) as exc_info:
        parse_coordinates("N 48 E 2 garbage")
    assert exc_info.value.position == 9


def test_missing_hemisphere():
    with pytest.raises(MissingHemisphere) as exc_info:
        parse_coordinates("48 30, 2 20 E")
    assert exc_info.value.position == 5

    with pytest.raises(MissingHemisphere):
        parse_coordinates("N 48, 2 20")


def test_malformed_numbers():
    with pytest.raises(MalformedNumber) as exc_info:
        parse_coordinates("N 48.5.3 E 2")
    assert exc_info.value.position == 6

    with pytest.raises(MalformedNumber) as exc_info:
        parse_coordinates("N 123456789012345 E 2")
    assert exc_info.value.position == 16

    # 14 characters is still fine
    lat, _ = parse_coordinates("N 12.345678901 E 2")
    assert lat == pytest.approx(12.345678901)


def test_missing_number():
    with pytest.raises(MissingNumber) as exc_info:
        parse_coordinates("")
    assert exc_info.value.position == 0

    with pytest.raises(MissingNumber) as exc_info:
        parse_coordinates("N 48")
    assert exc_info.value.position == 4

    # Hemisphere letters are upper case only
    with pytest.raises(MissingNumber):
        parse_coordinates("n 48 e 2")


def test_error_byte_offset():
    with pytest.raises(MissingNumber) as exc_info:
        parse_coordinates("N 48° ")
    # The degree sign is one character but two UTF-8 bytes
    assert exc_info.value.position == 6
    assert exc_info.value.byte_offset == 7


def test_parser_position_after_success():
    parser = CoordinateParser("N 48 E 2 ")
    assert parser.parse() == pytest.approx((48.0, 2.0))
    assert parser.position == len("N 48 E 2 ")
