import io

import pytest

from gp102_poi import run
from gp102_poi.poi_codec import PoiIcon, decode_record, encode_record

TRIP_LINE = "trip-01 (star) N 48° 30.250 E 002° 20.000"


@pytest.fixture
def poi_file(tmp_path):
    path = tmp_path / "trip.bin"
    path.write_bytes(encode_record("trip-01", 48.50417, 2.33333))
    return path


def test_decode_one_file(poi_file, capsys):
    assert run.main([str(poi_file)]) == 0
    captured = capsys.readouterr()
    assert captured.out == TRIP_LINE + "\n"
    assert captured.err == ""


def test_decode_errors_accumulate(poi_file, tmp_path, capsys):
    short = tmp_path / "short.bin"
    short.write_bytes(poi_file.read_bytes()[:100])
    bad_icon = tmp_path / "icon.bin"
    data = bytearray(poi_file.read_bytes())
    data[1] = 9
    bad_icon.write_bytes(bytes(data))
    missing = tmp_path / "missing.bin"

    assert run.main([str(poi_file), str(short), str(bad_icon), str(missing), str(poi_file)]) == 1
    captured = capsys.readouterr()
    assert captured.out == TRIP_LINE + "\n" + TRIP_LINE + "\n"
    assert f"Error: unexpected size of '{short}'." in captured.err
    assert f"Error: {bad_icon}: invalid file type." in captured.err
    assert f"Error reading from '{missing}'" in captured.err


def test_decode_invalid_signature_warns(poi_file, capsys):
    data = bytearray(poi_file.read_bytes())
    data[0] = 0
    poi_file.write_bytes(bytes(data))

    assert run.main([str(poi_file)]) == 0
    captured = capsys.readouterr()
    assert captured.out == TRIP_LINE + "\n"
    assert f"Warning: {poi_file}: invalid signature, continuing anyway." in captured.err


def test_no_arguments_prints_usage(capsys):
    assert run.main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_bad_arguments(capsys):
    for argv in (
        ["-e", "trip-01"],
        ["-e", "trip-01", "N 48 E 2", "extra.bin"],
        ["trip.bin", "-e"],
        ["--bogus"],
    ):
        with pytest.raises(SystemExit) as exc_info:
            run.main(argv)
        assert exc_info.value.code == 1
        assert "usage:" in capsys.readouterr().err


@pytest.mark.parametrize("name", ["-a1", "-1-2"])
def test_encode_name_starting_with_dash(name, capsysbinary):
    assert run.main(["-e", name, "N 48 E 2"]) == 0
    record = decode_record(capsysbinary.readouterr().out)
    assert record.display_name == name
    assert record.latitude == pytest.approx(48.0)


def test_write_poi():
    out = io.BytesIO()
    assert run.write_poi("trip-01", "N 48° 30' 15\" E 2° 20' 0\"", out) == 0
    record = decode_record(out.getvalue())
    assert record.display_name == "trip-01"
    assert record.icon == PoiIcon.STAR
    assert record.latitude == pytest.approx(48.50417, abs=1e-5)
    assert record.longitude == pytest.approx(2.33333, abs=1e-5)


def test_write_poi_bad_coordinates(capsys):
    run.main([])  # installs the stderr handler
    capsys.readouterr()

    out = io.BytesIO()
    assert run.write_poi("trip-01", "N 48 S", out) == 1
    assert out.getvalue() == b""
    assert "N 48 S\n     ^" in capsys.readouterr().err


def test_write_poi_bad_name(capsys):
    run.main([])
    capsys.readouterr()

    out = io.BytesIO()
    assert run.write_poi("café", "N 48 E 2", out) == 1
    assert out.getvalue() == b""
    assert "unsupported character" in capsys.readouterr().err


def test_encode_mode_writes_stdout(capsysbinary):
    assert run.main(["-e", "trip-01", "48.50417 N, 2.33333 E"]) == 0
    data = capsysbinary.readouterr().out
    assert data == encode_record("trip-01", 48.50417, 2.33333)
