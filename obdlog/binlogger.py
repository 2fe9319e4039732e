"""Logger streaming binary data packets and writing binary or CSV log files."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from obdlog.config import StreamFormat
from obdlog.packets import (
    COMMAND_SIZE,
    HEADER_LEN,
    Command,
    DataPacket,
    FileHeader,
    FileInfo,
    LogType,
)
from obdlog.pids import format_pid

_FOLDER = "FRMATICS"
_MAX_FILE_INDEX = 0xFFFF
_HEADER_READ_SIZE = 16  # bytes of the header that describe a file


def _u32(value: int) -> int:
    return value & 0xFFFFFFFF


def _format_value(value: float | int, count: int) -> str:
    if isinstance(value, float):
        return f"{value:.{6 if count == 2 else 2}f}"
    return str(int(value))


class BinaryLogger:
    """Logger for one to three readings per record.

    Each record goes to ``out`` as a binary data packet (or as a
    ``PID,values`` text line when ``stream_format`` is not binary) and, when
    a log file is open, to the file as a packet (binary log format) or as an
    ``elapsed,PID,values`` line (CSV log format).
    """

    def __init__(
        self,
        out: BinaryIO | None = None,
        log_format: StreamFormat = StreamFormat.CSV,
        stream_format: StreamFormat = StreamFormat.BIN,
    ) -> None:
        self.out = out
        self.log_format = StreamFormat(log_format)
        self.stream_format = StreamFormat(stream_format)
        self.data_time = 0
        self.data_size = 0
        self._last_data_time = 0
        self._file: BinaryIO | None = None

    def __enter__(self) -> BinaryLogger:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close_file()

    @property
    def _extension(self) -> str:
        return "LOG" if self.log_format == StreamFormat.BIN else "CSV"

    def log_data(self, pid: int, *args: float | int) -> None:
        """Stream and log one, two or three values under ``pid``."""
        count = len(args)
        if not 1 <= count <= 3:
            raise TypeError(f"expected 1 to 3 values, got {count}")
        if count == 3:
            args = tuple(int(v) for v in args)
        fields = ",".join(_format_value(v, count) for v in args)
        text = f"{format_pid(pid, False)},{fields}"
        packet = DataPacket(_u32(self.data_time), pid, tuple(args)).to_bytes()

        if self.out is not None:
            if self.stream_format == StreamFormat.BIN:
                self.out.write(packet)
            else:
                self.out.write(text.encode("ascii") + b"\n")

        if self._file is None:
            return
        if self.log_format == StreamFormat.BIN:
            self._file.write(packet)
            self.data_size += len(packet)
        else:
            elapsed = _u32(self.data_time - self._last_data_time)
            line = f"{elapsed},{text}\n".encode("ascii")
            self._file.write(line)
            self.data_size += len(line)
            self._last_data_time = self.data_time

    def send_file_info(self, name: str, stream: BinaryIO) -> FileInfo | None:
        """Send a description of the log file ``name`` read from ``stream``.

        Returns the description sent, or None when the file is not a usable
        log (too short, no index in its name, or an unreadable header).
        """
        start = stream.tell()
        size = stream.seek(0, 2)
        stream.seek(start)
        if size < HEADER_LEN:
            return None
        header_bytes = stream.read(_HEADER_READ_SIZE)
        if len(header_bytes) != _HEADER_READ_SIZE:
            return None
        info = FileInfo.from_file(name, size, header_bytes)
        if info is None:
            return None
        if self.out is not None:
            self.out.write(info.to_bytes())
        return info

    def send_command(self, message: int, data: bytes = b"") -> Command:
        """Send a control message carrying up to twelve bytes of ``data``."""
        command = Command(message=message, data=data)
        if self.out is not None:
            self.out.write(command.to_bytes())
        return command

    def receive_command(self, stream: BinaryIO) -> Command | None:
        """Read one control message; None when incomplete or corrupt."""
        raw = stream.read(COMMAND_SIZE)
        if not raw or len(raw) != COMMAND_SIZE:
            return None
        try:
            return Command.from_bytes(raw)
        except ValueError:
            return None

    def open_file(
        self,
        root: str | Path,
        log_type: int = LogType.DEFAULT,
        log_flags: int = 0,
        date_time: int = 0,
    ) -> int:
        """Open the next log file under ``root/FRMATICS`` and return its index."""
        directory = Path(root) / _FOLDER
        if not directory.exists():
            directory.mkdir(parents=True)
            index = 1
        else:
            index = next(
                (
                    i
                    for i in range(1, _MAX_FILE_INDEX + 1)
                    if not (directory / f"DAT{i:05d}.{self._extension}").exists()
                ),
                0,
            )
            if index == 0:
                raise FileExistsError(f"no free log file name left in {directory}")
        path = directory / f"DAT{index:05d}.{self._extension}"
        self._file = open(path, "ab")
        if self.log_format == StreamFormat.BIN:
            header = FileHeader(log_type=log_type, flags=log_flags, date_time=date_time)
            self._file.write(header.to_bytes())
            self.data_size = HEADER_LEN
        return index

    def flush_file(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close_file(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None