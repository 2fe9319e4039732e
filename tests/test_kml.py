import datetime
import io

import pytest

from obdlog.kml import (
    KmlTrack,
    TrackPoint,
    convert_to_kml,
    hex_to_uint16,
    main,
    read_records,
)
from obdlog.pids import Pid

TAIL_END = "</Folder></Document></kml>"


def test_hex_to_uint16_plain():
    assert hex_to_uint16("10C,12") == 0x10C


def test_hex_to_uint16_skips_spaces_and_mixed_case():
    assert hex_to_uint16("ab Cd") == 0xABCD


def test_hex_to_uint16_limits_to_four_digits():
    assert hex_to_uint16("12345") == 0x1234


def test_hex_to_uint16_non_hex_gives_zero():
    assert hex_to_uint16("xyz") == 0


def test_read_records_names_and_hex():
    recs = list(read_records(["#1000,LAT,37.5\n", "20,10D,60\n", "30,UTC,1200\n"]))
    assert [r[1] for r in recs] == [Pid.GPS_LATITUDE, Pid.SPEED, Pid.GPS_TIME]
    assert recs[0][0] == 1000
    assert recs[1][0] - recs[0][0] == 20
    assert recs[2][0] - recs[1][0] == 30
    assert recs[0][2] == "37.5"


def test_read_records_skips_empty_and_incomplete_lines():
    recs = list(read_records(["#100\r\n", "\r\n", "5,10D,1\r\n", "7,ACC\n"]))
    assert len(recs) == 1
    assert recs[0] == (100 + 5, Pid.SPEED, "1")


def test_read_records_multi_value():
    recs = list(read_records(["#0,ACC,1,2,3"]))
    assert recs == [(0, Pid.ACC, "1,2,3")]


def _track_with_fix():
    out = io.StringIO()
    track = KmlTrack(out)
    track.add(1000, Pid.GPS_DATE, "150316")
    track.add(1000, Pid.GPS_TIME, "12345600")
    track.add(1000, Pid.GPS_LATITUDE, "37.5")
    track.add(1010, Pid.GPS_LONGITUDE, "-122.25")
    return track, out


def test_add_writes_point_worked_example():
    track, out = _track_with_fix()
    assert out.getvalue() == (
        "<when>2016-03-15T12:34:56.000Z</when>"
        "<gx:coord>-122.250000 37.500000 0</gx:coord>"
    )
    assert len(track.points) == 1
    assert track.points[0].timestamp == 1010
    assert track.start_lat == 37.5


def test_add_no_point_without_time_change():
    track, out = _track_with_fix()
    before = out.getvalue()
    track.add(1020, Pid.SPEED, "50")
    assert len(track.points) == 1
    assert out.getvalue() == before


def test_add_microdegree_coordinates():
    track = KmlTrack(io.StringIO())
    track.add(0, Pid.GPS_LATITUDE, "37500000")
    assert track.current.lat == 37.5


def test_add_partial_acc():
    track = KmlTrack(io.StringIO())
    track.add(0, Pid.ACC, "1,-2")
    assert track.current.acc == (1, -2, 0)


def test_add_without_date_uses_yesterday():
    out = io.StringIO()
    track = KmlTrack(out, clock=lambda: 86400 * 3)
    track.add(0, Pid.GPS_TIME, "1000000")
    track.add(0, Pid.GPS_LATITUDE, "37.5")
    track.add(0, Pid.GPS_LONGITUDE, "-122.25")
    expected = datetime.date.fromtimestamp(86400 * 2).isoformat()
    assert out.getvalue().startswith(f"<when>{expected}T")


def test_write_tail_gear_for_standing_vehicle():
    out = io.StringIO()
    track = KmlTrack(out)
    track.points.append(TrackPoint(speed=0, rpm=800))
    assert track.write_tail() == 0
    text = out.getvalue()
    assert '<gx:SimpleArrayData name="gear"><gx:value>1</gx:value></gx:SimpleArrayData>' in text
    assert text.endswith(TAIL_END)
    assert "<Placemark><name>" not in text


def test_write_tail_brake_point():
    out = io.StringIO()
    track = KmlTrack(out)
    track.points.extend(
        [
            TrackPoint(timestamp=0, speed=0, throttle=10, lat=1.0, lng=2.0),
            TrackPoint(timestamp=1000, speed=100, throttle=10, rpm=3000, lat=1.0, lng=2.0),
            TrackPoint(timestamp=2000, speed=50, throttle=10, lat=1.0, lng=2.0),
            TrackPoint(timestamp=3000, speed=50, throttle=10, lat=1.0, lng=2.0),
        ]
    )
    assert track.write_tail() == 1
    text = out.getvalue()
    assert text.count("#brakepoint") == 1
    assert '<Data name="Speed"><value>100</value></Data>' in text
    assert '<Data name="RPM"><value>3000</value></Data>' in text
    assert "</Placemark>\r\n" in text
    assert text.endswith(TAIL_END)


def test_write_tail_constant_speed_has_no_brake_points():
    out = io.StringIO()
    track = KmlTrack(out)
    track.points.extend(TrackPoint(timestamp=t * 1000, speed=60) for t in range(4))
    assert track.write_tail() == 0
    assert "#brakepoint" not in out.getvalue()


LOG = "#1000,DTE,150316\r\n0,UTC,12345600\r\n10,LAT,37.5\r\n10,LNG,-122.25\r\n"


def test_convert_to_kml(tmp_path):
    log = tmp_path / "log.csv"
    log.write_text(LOG)
    head = tmp_path / "head.txt"
    head.write_text("<kml-head>")
    kml = tmp_path / "out.kml"
    track = convert_to_kml(log, kml, head_path=head)
    assert len(track.points) == 1
    assert track.points[0].timestamp == 1000 + 10 + 10
    text = kml.read_text()
    assert text.startswith("<kml-head><when>")
    assert "<gx:coord>" in text
    assert text.endswith(TAIL_END)


def test_convert_to_kml_stops_after_end(tmp_path):
    log = tmp_path / "log.csv"
    log.write_text("#1000,LAT,37.5\n0,LNG,-122.25\n#5000,UTC,12000000\n0,LAT,37.6\n")
    track = convert_to_kml(log, tmp_path / "out.kml", end=2000, head_path=None)
    assert track.current.lat == 37.5
    assert len(track.points) == 1


def test_convert_to_kml_no_records(tmp_path):
    log = tmp_path / "log.csv"
    log.write_text("#1000\n5\n")
    kml = tmp_path / "out.kml"
    assert convert_to_kml(log, kml, head_path=None) is None
    assert not kml.exists()


def test_convert_to_kml_missing_log(tmp_path):
    with pytest.raises(FileNotFoundError):
        convert_to_kml(tmp_path / "missing.csv", tmp_path / "out.kml")


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_default_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "log.csv").write_text(LOG)
    assert main(["log.csv"]) == 0
    assert (tmp_path / "log.csv.kml").read_text().endswith(TAIL_END)


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "none.csv")]) == 1
    assert "Error opening file" in capsys.readouterr().out