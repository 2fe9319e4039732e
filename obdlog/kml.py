"""Conversion of CSV logger output into a KML track with extended data."""

from __future__ import annotations

import datetime
import os
import re
import struct
import sys
import time
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Iterator, TextIO

from obdlog.pids import Pid, pid_from_name

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_MAX_COORD_JUMP = 0.1  # degrees between consecutive track points
_BRAKE_G = -0.2
_MIN_BRAKE_SPEED = 25
_BRAKE_GAP = 500  # ms skipped after a brake point

_USAGE = """\
Usage: {prog} [Input file] [Output file] [Start Pos] [End Pos]

Description about the arguments:

Input file: path to logged CSV file
Output file: path to KML file (output in the input directory if unspecified)
Start Pos: start time (seconds) for processing
End Pos: end time (seconds) for processing
"""


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _u32(value: int) -> int:
    return value & 0xFFFFFFFF


def _u16(value: int) -> int:
    return value & 0xFFFF


def _i16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _is_float(text: str) -> bool:
    return "." in text.split(",", 1)[0]


def _coordinate(value: str) -> float:
    if _is_float(value):
        return _f32(_atof(value))
    return _f32(_f32(float(_atoi(value))) / 1000000)


def hex_to_uint16(text: str) -> int:
    """Parse up to four hex digits at the start of ``text``, skipping spaces."""
    result = 0
    digits = 0
    for ch in text:
        if digits == 4:
            break
        if ch == " ":
            continue
        if ch not in _HEX_DIGITS:
            break
        result = (result << 4) | int(ch, 16)
        digits += 1
    return result


def read_records(lines: Iterable[str]) -> Iterator[tuple[int, int, str]]:
    """Yield ``(timestamp, pid, value)`` for each record of a CSV log.

    A leading ``#`` marks an absolute timestamp; otherwise the first field
    is added to the running time.  The PID is a three-letter name or hex.
    """
    ts = 0
    for line in lines:
        for seg in re.split(r"[\r\n]", line):
            if not seg:
                continue
            if seg.startswith("#"):
                ts = _u32(_atoi(seg[1:]))
            else:
                ts = _u32(ts + _atoi(seg))
            comma = seg.find(",")
            if comma < 0:
                continue
            rest = seg[comma + 1:]
            pid = 0
            if len(rest) > 3 and rest[3] == ",":
                pid = pid_from_name(rest[:3]) or 0
            if not pid:
                pid = hex_to_uint16(rest)
            comma = rest.find(",")
            if comma < 0:
                continue
            yield ts, pid, rest[comma + 1:]


@dataclass
class TrackPoint:
    """State of all tracked readings at one point of the track."""

    timestamp: int = 0
    lat: float = 0.0
    lng: float = 0.0
    speed: int = 0
    speedgps: int = 0
    rpm: int = 0
    throttle: int = 0
    coolant: int = 0
    intake: int = 0
    load: int = 0
    absload: int = 0
    alt: int = 0
    acc: tuple[int, int, int] = (0, 0, 0)


_INT_FIELDS: dict[int, tuple[str, Callable[[int], int]]] = {
    Pid.GPS_ALTITUDE: ("alt", _i16),
    Pid.SPEED: ("speed", _u16),
    Pid.RPM: ("rpm", _u16),
    Pid.THROTTLE: ("throttle", _u16),
    Pid.COOLANT_TEMP: ("coolant", _i16),
    Pid.INTAKE_TEMP: ("intake", _i16),
    Pid.ENGINE_LOAD: ("load", _u16),
    Pid.ABS_ENGINE_LOAD: ("absload", _u16),
    Pid.GPS_SPEED: ("speedgps", _u16),
}


class KmlTrack:
    """Builds a ``gx:Track`` body from records and writes its extended data."""

    def __init__(self, out: TextIO, clock: Callable[[], float] = time.time) -> None:
        self.out = out
        self.points: list[TrackPoint] = []
        self.current = TrackPoint()
        self.start_lat = 0.0
        self.start_lng = 0.0
        self.cur_date = 0
        self.cur_time = 0
        self.last_time = 0
        self._clock = clock

    def _set_coordinate(self, attr: str, value: str) -> float:
        coord = _coordinate(value)
        setattr(self.current, attr, coord)
        if self.points:
            diff = _f32(coord - getattr(self.points[-1], attr))
            if diff > _MAX_COORD_JUMP or diff < -_MAX_COORD_JUMP:
                setattr(self.current, attr, 0.0)
        return coord

    def add(self, timestamp: int, pid: int, value: str) -> None:
        """Apply one record and emit a track point when the GPS time changes."""
        cur = self.current
        if pid == Pid.GPS_LATITUDE:
            coord = _coordinate(value)
            cur.lat = coord
            if not self.start_lat:
                self.start_lat = coord
            self._set_coordinate("lat", value)
        elif pid == Pid.GPS_LONGITUDE:
            coord = _coordinate(value)
            cur.lng = coord
            if not self.start_lng:
                self.start_lng = coord
            self._set_coordinate("lng", value)
        elif pid in _INT_FIELDS:
            attr, wrap = _INT_FIELDS[pid]
            setattr(cur, attr, wrap(_atoi(value)))
        elif pid == Pid.ACC:
            acc = list(cur.acc)
            parts = value.split(",")
            for axis, part in enumerate(parts[:3]):
                acc[axis] = _i16(_atoi(part))
            cur.acc = (acc[0], acc[1], acc[2])
        elif pid == Pid.GPS_DATE:
            self.cur_date = _u32(_atoi(value))
        elif pid == Pid.GPS_TIME:
            self.cur_time = _u32(_atoi(value))

        if self.cur_time != self.last_time and cur.lat and cur.lng:
            self._write_when()
            self.out.write(f"<gx:coord>{cur.lng:f} {cur.lat:f} {cur.alt:d}</gx:coord>")
            cur.timestamp = _u32(timestamp)
            self.points.append(replace(cur))
            self.last_time = self.cur_time

    def _write_when(self) -> None:
        out = self.out
        out.write("<when>")
        date = self.cur_date
        if date:
            out.write(f"{2000 + date % 100:04d}-{(date // 100) % 100:02d}-{date // 10000:02d}")
        else:
            yesterday = datetime.date.fromtimestamp(self._clock() - 86400)
            out.write(f"{yesterday.year:04d}-{yesterday.month:02d}-{yesterday.day:02d}")
        t = self.cur_time
        if t:
            out.write(
                f"T{t // 1000000:02d}:{(t // 10000) % 100:02d}:"
                f"{(t // 100) % 100:02d}.{(t % 100) * 10:03d}Z"
            )
        out.write("</when>")

    def _array(self, name: str, values: Iterable[object]) -> None:
        body = "".join(f"<gx:value>{v}</gx:value>" for v in values)
        self.out.write(f'<gx:SimpleArrayData name="{name}">{body}</gx:SimpleArrayData>')

    @staticmethod
    def _deceleration(a: TrackPoint, b: TrackPoint) -> float:
        delta = _f32(_f32(float(b.speed - a.speed)) * 1000)
        dt = _u32(b.timestamp - a.timestamp)
        if dt == 0:
            scaled = float("-inf") if delta < 0 else float("inf") if delta > 0 else float("nan")
        else:
            scaled = _f32(delta / _f32(float(dt)))
        return scaled / 3.6 / _f32(9.8)

    def write_tail(self) -> int:
        """Write the extended data and brake points; return the brake count."""
        out = self.out
        pts = self.points
        low_throttle = 50
        for p in pts:
            if p.speed == 0:
                low_throttle = p.throttle

        out.write('<ExtendedData><SchemaData schemaUrl="#schema">')
        self._array("speed", (p.speed for p in pts))
        self._array("rpm", (p.rpm for p in pts))
        self._array("gear", (p.rpm // p.speed if p.speed else 1 for p in pts))
        self._array("coolant", (p.coolant for p in pts))
        self._array("intake", (p.intake for p in pts))
        self._array("load", (p.load for p in pts))
        self._array("thr", (p.throttle for p in pts))
        self._array("alt", (p.alt for p in pts))
        self._array("acc", (f"X:{p.acc[0]} Y:{p.acc[1]} Z:{p.acc[2]}" for p in pts))
        self._array("ts", (p.timestamp for p in pts))
        out.write("</SchemaData></ExtendedData>\r\n</gx:Track></Placemark>")

        threshold = _f32(_BRAKE_G)
        count = 0
        i = 0
        while i < len(pts) - 1:
            p = pts[i]
            if p.speed < _MIN_BRAKE_SPEED or p.throttle > low_throttle + 2:
                i += 1
                continue
            if pts[i + 1].speed < p.speed:
                g = self._deceleration(p, pts[i + 1])
            elif i > 0 and p.speed < pts[i - 1].speed:
                g = self._deceleration(pts[i - 1], p)
            else:
                i += 1
                continue
            if g <= threshold:
                count += 1
                out.write(
                    f"<Placemark><name>#{count} {p.timestamp // 60000}:"
                    f"{(p.timestamp // 1000) % 60:02d}</name>"
                )
                out.write(
                    "<styleUrl>#brakepoint</styleUrl><Point><coordinates>"
                    f"{p.lng:f},{p.lat:f}</coordinates></Point>"
                )
                out.write("<ExtendedData>")
                out.write(f'<Data name="Speed"><value>{p.speed}</value></Data>')
                out.write(f'<Data name="RPM"><value>{p.rpm}</value></Data>')
                out.write(f'<Data name="ACC"><value>{g:.2f}G</value></Data>')
                out.write("</ExtendedData>")
                out.write("</Placemark>\r\n")
                until = _u32(p.timestamp + _BRAKE_GAP)
                i += 1
                while i < len(pts) and pts[i].timestamp < until:
                    i += 1
            i += 1
        out.write("</Folder></Document></kml>")
        return count


def _append_file(out: TextIO, path: str | os.PathLike[str] | None) -> None:
    if path is None:
        return
    try:
        with open(path, encoding="latin-1", newline="") as head:
            out.write(head.read())
    except OSError:
        return


def convert_to_kml(
    logfile: str | os.PathLike[str],
    kmlfile: str | os.PathLike[str],
    start: int = 0,
    end: int = 0,
    head_path: str | os.PathLike[str] | None = "kmlhead.txt",
) -> KmlTrack | None:
    """Convert a CSV log into a KML file.

    The KML file is created on the first record, beginning with the content
    of ``head_path`` when that file can be read.  Processing stops after the
    first record past ``end`` ms when ``end`` is non-zero; ``start`` is
    accepted for command-line compatibility and not applied.  Returns the
    track, or None when the log held no records.
    """
    track: KmlTrack | None = None
    out: TextIO | None = None
    with open(logfile, encoding="latin-1", newline="") as log:
        try:
            for ts, pid, value in read_records(log):
                print(
                    f"Time={ts // 60000:02d}:{(ts % 60000) // 1000:02d}.{ts % 1000:03d} "
                    f"{int(pid):X}={value}\t\t\r",
                    end="",
                )
                if track is None:
                    out = open(kmlfile, "w", encoding="latin-1", newline="")
                    _append_file(out, head_path)
                    track = KmlTrack(out)
                track.add(ts, pid, value)
                if end and ts > end:
                    break
            if track is not None:
                print("Generating extended data")
                track.write_tail()
        finally:
            if out is not None:
                out.close()
    if track is None:
        print("No GPS data available in this file. KML not created.")
    return track


def main(argv: list[str] | None = None) -> int:
    """Command-line entry: ``input [output] [start s] [end s]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "kml"
        print(_USAGE.format(prog=prog))
        return 1
    start = _u32(_atoi(args[2]) * 1000) if len(args) > 2 else 0
    end = _u32(_atoi(args[3]) * 1000) if len(args) > 3 else 0
    outfile = args[1] if len(args) > 1 else f"{args[0]}.kml"
    try:
        convert_to_kml(args[0], outfile, start, end)
    except OSError as exc:
        print(f"Error opening file - {exc.filename or args[0]}")
        return 1
    return 0