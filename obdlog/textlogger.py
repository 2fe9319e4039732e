"""Text-format data loggers writing CSV records to a log folder and a stream."""

from __future__ import annotations

import time
from pathlib import Path
from typing import BinaryIO, Callable

from obdlog.config import StreamFormat
from obdlog.packets import DataPacket
from obdlog.pids import format_pid

_MAX_FILE_INDEX = 0xFFFF
_ABSOLUTE_INTERVAL = 60000  # ms after which a timestamp is written in full


def _u32(value: int) -> int:
    return value & 0xFFFFFFFF


def next_log_path(root: str | Path, folder: str, date_time: int = 0) -> tuple[int, Path]:
    """Choose the next log file under ``root/folder`` and return ``(index, path)``.

    The folder is created when missing, and the first file is then index 1.
    In an existing folder a non-zero ``date_time`` names the file after it;
    otherwise the lowest unused ``DATnnnnn.CSV`` index is taken.
    """
    directory = Path(root) / folder
    if not directory.exists():
        directory.mkdir(parents=True)
        return 1, directory / "DAT00001.CSV"
    if date_time:
        return 1, directory / f"{_u32(date_time):08d}.CSV"
    for index in range(1, _MAX_FILE_INDEX + 1):
        path = directory / f"DAT{index:05d}.CSV"
        if not path.exists():
            return index, path
    raise FileExistsError(f"no free log file name left in {directory}")


def _format_values(args: tuple[int, ...]) -> str:
    if len(args) not in (1, 3):
        raise TypeError(f"expected 1 or 3 values, got {len(args)}")
    return ",".join(f"{int(v):d}" for v in args)


class TextLogger:
    """Logger writing ``timestamp,PID,value`` lines with compact timestamps.

    A line's timestamp is the time elapsed since the previous record, or the
    absolute time prefixed with ``#`` for the first record of a file and
    after a gap of a minute or more.  Records are also written to ``out``,
    each followed by CR LF, and optionally gathered in a bounded cache.
    """

    def __init__(self, out: BinaryIO | None = None, cache_size: int | None = None) -> None:
        self.out = out
        self.cache_size = cache_size
        self.cache = ""
        self.data_time = 0
        self.data_size = 0
        self._last_data_time = 0
        self._file: BinaryIO | None = None

    def __enter__(self) -> TextLogger:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close_file()

    def timestamp(self, absolute: bool) -> str:
        """Return the timestamp field for the current ``data_time``."""
        if absolute or self.data_time >= _u32(self._last_data_time + _ABSOLUTE_INTERVAL):
            return f"#{_u32(self.data_time)},"
        elapsed = (self.data_time - self._last_data_time) & 0xFFFF
        return f"{elapsed},"

    def _record(self, text: str) -> None:
        if self._file is not None:
            line = (self.timestamp(self.data_size == 0) + text).encode("ascii")
            self._file.write(line + b"\n")
            self.data_size += len(line) + 1
        self._last_data_time = self.data_time

    def _dispatch(self, text: str) -> None:
        if self.cache_size is not None:
            if len(self.cache) + len(text) + 12 - self.cache_size >= 0:
                # cache full: the record is dropped
                return
            self.cache += self.timestamp(not self.cache) + ","
            if len(self.cache) + len(text) < self.cache_size - 1:
                self.cache += text + " "
        if self.out is not None:
            self.out.write(text.encode("ascii") + b"\r\n")

    def log_text(self, text: str) -> None:
        """Log a ready-made record."""
        self._dispatch(text)
        self._record(text)

    def log_pid(self, pid: int) -> None:
        """Log a record holding only a PID."""
        self.log_text(format_pid(pid, False) + ",")

    def log_data(self, pid: int, *args: int) -> None:
        """Log one or three integer values under ``pid``."""
        self.log_text(f"{format_pid(pid, False)},{_format_values(args)}")

    def log_coordinate(self, pid: int, value: int) -> None:
        """Log a coordinate given in millionths of a degree."""
        whole = abs(value) // 1000000
        if value < 0:
            whole = -whole
        self.log_text(f"{format_pid(pid, False)},{whole}.{abs(value) % 1000000:06d}")

    def purge_cache(self) -> None:
        """Empty the record cache."""
        self.cache = ""

    def open_file(self, root: str | Path, date_time: int = 0) -> int:
        """Open the next log file under ``root/DATA`` and return its index."""
        self.data_size = 0
        index, path = next_log_path(root, "DATA", date_time)
        self._file = open(path, "ab")
        return index

    def flush_file(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close_file(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        self.data_size = 0


class StreamLogger:
    """Logger streaming each record and writing ``elapsed,PID,value`` to a file.

    Records end with CR.  With ``StreamFormat.TEXT`` known PIDs are written
    by their three-letter names; with ``StreamFormat.BIN`` the stream carries
    binary data packets instead of text.
    """

    def __init__(
        self,
        out: BinaryIO | None = None,
        stream_format: StreamFormat = StreamFormat.TEXT,
        min_interval: int = 0,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.out = out
        self.stream_format = StreamFormat(stream_format)
        self.min_interval = min_interval
        self._sleep = sleep
        self.data_time = 0
        self.data_size = 0
        self._last_data_time = 0
        self._last_send_time = 0
        self._file: BinaryIO | None = None

    def __enter__(self) -> StreamLogger:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close_file()

    def _record(self, data: bytes) -> None:
        if self._file is not None:
            elapsed = str(_u32(self.data_time - self._last_data_time)).encode("ascii")
            self._file.write(elapsed + b"," + data)
            self.data_size += len(elapsed) + 1 + len(data)
        self._last_data_time = self.data_time

    def _send(self, data: bytes) -> None:
        if self.out is not None:
            self.out.write(data)
        if self.min_interval:
            now = _u32(int(time.monotonic() * 1000))
            elapsed = _u32(now - self._last_send_time)
            if elapsed < self.min_interval:
                self._sleep((self.min_interval - elapsed) / 1000)
            self._last_send_time = now
        else:
            self._sleep(0.01)

    def log_char(self, c: str) -> None:
        """Write a single printable character to the log file."""
        if c >= " ":
            if self._file is not None:
                self._file.write(c.encode("latin-1"))
            self.data_size += 1

    def log_data(self, pid: int, *args: int) -> None:
        """Stream and log one or three integer values under ``pid``."""
        use_names = self.stream_format == StreamFormat.TEXT
        text = f"{format_pid(pid, use_names)},{_format_values(args)}\r".encode("ascii")
        if self.stream_format == StreamFormat.BIN:
            packet = DataPacket(_u32(self.data_time), pid, tuple(args)).to_bytes()
            if len(args) == 3:
                if self.out is not None:
                    self.out.write(packet)
            else:
                self._send(packet)
        else:
            self._send(text)
        self._record(text)

    def open_file(self, root: str | Path, date_time: int = 0) -> int:
        """Open the next log file under ``root/FRMATICS`` and return its index."""
        self.data_size = 0
        index, path = next_log_path(root, "FRMATICS")
        self._file = open(path, "ab")
        self._last_data_time = date_time
        return index

    def flush_file(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close_file(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None