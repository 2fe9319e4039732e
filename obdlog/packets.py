"""Binary records and messages exchanged by the binary-format loggers."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from functools import reduce

from obdlog.pids import CompactPid

HEADER_LEN = 128
FILE_HEADER_ID = 0x55445553  # 'UDUS'
FILE_INFO_SIZE = 20
COMMAND_SIZE = 20
COMMAND_DATA_SIZE = 12

_DATA_HEAD = struct.Struct("<IHBB")
_FILE_HEADER = struct.Struct("<IIBBHI")
_FILE_INFO = struct.Struct("<IHBBHHHB5x")
_COMMAND_HEAD = struct.Struct("<IHBB")


class LogType(IntEnum):
    DEFAULT = 0
    ZERO_TO_60 = 1
    ZERO_TO_100 = 2
    FROM_100_TO_200 = 3
    QUARTER_MILE = 4
    LAPS = 5
    ROUTE = 6


class LogFlag(IntFlag):
    CAR = 0x1
    CYCLING = 0x2
    OBD = 0x10
    GPS = 0x20
    ACC = 0x40


class Message(IntEnum):
    FILE_LIST_BEGIN = 0x1
    FILE_LIST_END = 0x2
    FILE_INFO = 0x3
    FILE_REQUEST = 0x4


def checksum(data: bytes) -> int:
    """XOR of all bytes of ``data``."""
    return reduce(lambda acc, b: acc ^ b, bytes(data), 0)


def _with_checksum(raw: bytes, offset: int) -> bytes:
    out = bytearray(raw)
    out[offset] = 0
    out[offset] = checksum(out)
    return bytes(out)


@dataclass(frozen=True)
class DataPacket:
    """One timestamped reading of one to three values."""

    time: int
    pid: int
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if not 1 <= len(values) <= 3:
            raise ValueError(f"a data packet holds 1 to 3 values, got {len(values)}")
        object.__setattr__(self, "values", values)

    def to_bytes(self) -> bytes:
        raw = _DATA_HEAD.pack(
            self.time & 0xFFFFFFFF, self.pid & 0xFFFF, len(self.values), 0
        ) + struct.pack(f"<{len(self.values)}f", *self.values)
        return _with_checksum(raw, 7)

    @classmethod
    def from_bytes(cls, data: bytes) -> DataPacket:
        data = bytes(data)
        if len(data) < _DATA_HEAD.size:
            raise ValueError("data packet too short")
        time, pid, count, _ = _DATA_HEAD.unpack_from(data)
        if not 1 <= count <= 3:
            raise ValueError(f"invalid value count {count}")
        size = _DATA_HEAD.size + 4 * count
        if len(data) != size:
            raise ValueError(f"data packet must be {size} bytes, got {len(data)}")
        if checksum(data) != 0:
            raise ValueError("data packet checksum mismatch")
        values = struct.unpack_from(f"<{count}f", data, _DATA_HEAD.size)
        return cls(time, pid, values)


@dataclass(frozen=True)
class FileHeader:
    """Header at the start of a binary log file."""

    log_type: int = LogType.DEFAULT
    flags: int = 0
    date_time: int = 0  # YYMMDDHHMM
    id: int = FILE_HEADER_ID
    data_offset: int = HEADER_LEN
    ver: int = 1

    def to_bytes(self) -> bytes:
        """Return the header padded with zeros to ``HEADER_LEN`` bytes."""
        raw = _FILE_HEADER.pack(
            self.id,
            self.data_offset,
            self.ver,
            self.log_type,
            self.flags & 0xFFFF,
            self.date_time & 0xFFFFFFFF,
        )
        return raw.ljust(HEADER_LEN, b"\x00")

    @classmethod
    def from_bytes(cls, data: bytes) -> FileHeader:
        if len(data) < _FILE_HEADER.size:
            raise ValueError("file header too short")
        id_, offset, ver, log_type, flags, date_time = _FILE_HEADER.unpack_from(bytes(data))
        return cls(
            log_type=log_type,
            flags=flags,
            date_time=date_time,
            id=id_,
            data_offset=offset,
            ver=ver,
        )


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class FileInfo:
    """Description of a stored log file, sent when listing files."""

    file_index: int
    file_size: int
    log_flags: int = 0
    log_type: int = LogType.DEFAULT
    time: int = 0
    pid: int = CompactPid.MESSAGE
    message: int = Message.FILE_INFO

    def to_bytes(self) -> bytes:
        raw = _FILE_INFO.pack(
            self.time & 0xFFFFFFFF,
            self.pid & 0xFFFF,
            self.message,
            0,
            self.file_index & 0xFFFF,
            self.file_size & 0xFFFF,
            self.log_flags & 0xFFFF,
            self.log_type,
        )
        return _with_checksum(raw, 7)

    @classmethod
    def from_file(cls, name: str, size: int, header_bytes: bytes) -> FileInfo | None:
        """Describe a log file, or return None if it is not a usable log."""
        if size < HEADER_LEN:
            return None
        index = _leading_int(name[3:]) & 0xFFFF
        if index == 0:
            return None
        try:
            header = FileHeader.from_bytes(header_bytes)
        except ValueError:
            return None
        return cls(
            file_index=index,
            file_size=size & 0xFFFF,
            log_flags=header.flags,
            log_type=header.log_type,
            time=header.date_time,
        )


@dataclass(frozen=True)
class Command:
    """A control message with up to twelve bytes of payload."""

    message: int
    data: bytes = b""
    time: int = 0
    pid: int = CompactPid.MESSAGE
    _size: int = field(default=COMMAND_DATA_SIZE, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) > COMMAND_DATA_SIZE:
            raise ValueError(f"command payload exceeds {COMMAND_DATA_SIZE} bytes")
        object.__setattr__(self, "data", data.ljust(COMMAND_DATA_SIZE, b"\x00"))

    def to_bytes(self) -> bytes:
        raw = _COMMAND_HEAD.pack(
            self.time & 0xFFFFFFFF, self.pid & 0xFFFF, self.message, 0
        ) + self.data
        return _with_checksum(raw, 7)

    @classmethod
    def from_bytes(cls, data: bytes) -> Command:
        data = bytes(data)
        if len(data) != COMMAND_SIZE:
            raise ValueError(f"command must be {COMMAND_SIZE} bytes, got {len(data)}")
        if checksum(data) != 0:
            raise ValueError("command checksum mismatch")
        time, pid, message, _ = _COMMAND_HEAD.unpack_from(data)
        return cls(message=message, data=data[_COMMAND_HEAD.size:], time=time, pid=pid)