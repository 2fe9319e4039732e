import pytest

from obdlog.packets import (
    COMMAND_SIZE,
    FILE_INFO_SIZE,
    HEADER_LEN,
    Command,
    DataPacket,
    FileHeader,
    FileInfo,
    LogFlag,
    LogType,
    Message,
    checksum,
)
from obdlog.pids import CompactPid, Pid


def test_checksum_empty():
    assert checksum(b"") == 0


def test_checksum_self_cancels():
    data = bytes(range(40))
    assert checksum(data + bytes([checksum(data)])) == 0


@pytest.mark.parametrize("values,size", [((1.0,), 12), ((1.0, 2.0), 16), ((1, 2, 3), 20)])
def test_data_packet_sizes(values, size):
    raw = DataPacket(1000, Pid.RPM, values).to_bytes()
    assert len(raw) == size
    assert checksum(raw) == 0


def test_data_packet_wire_bytes():
    raw = DataPacket(0, Pid.RPM, (1.0,)).to_bytes()
    assert raw == b"\x00\x00\x00\x00\x0c\x01\x01\xb3\x00\x00\x80\x3f"


def test_data_packet_round_trip():
    packet = DataPacket(123456, CompactPid.ACC, (1.5, -2.25, 8.0))
    assert DataPacket.from_bytes(packet.to_bytes()) == packet


def test_data_packet_corrupt():
    raw = bytearray(DataPacket(5, Pid.SPEED, (3.0,)).to_bytes())
    raw[9] ^= 0x01
    with pytest.raises(ValueError):
        DataPacket.from_bytes(bytes(raw))


def test_data_packet_truncated():
    raw = DataPacket(5, Pid.SPEED, (3.0, 4.0)).to_bytes()
    with pytest.raises(ValueError):
        DataPacket.from_bytes(raw[:-1])


@pytest.mark.parametrize("values", [(), (1.0, 2.0, 3.0, 4.0)])
def test_data_packet_value_count(values):
    with pytest.raises(ValueError):
        DataPacket(0, Pid.RPM, values)


def test_file_header_layout():
    header = FileHeader(LogType.LAPS, LogFlag.CAR | LogFlag.GPS, 1305291359)
    raw = header.to_bytes()
    assert len(raw) == HEADER_LEN
    assert raw[:4] == b"SUDU"
    assert raw[16:] == bytes(HEADER_LEN - 16)


def test_file_header_round_trip():
    header = FileHeader(LogType.ROUTE, LogFlag.OBD, 1307281259)
    parsed = FileHeader.from_bytes(header.to_bytes())
    assert parsed == header
    assert parsed.data_offset == HEADER_LEN


def test_file_header_too_short():
    with pytest.raises(ValueError):
        FileHeader.from_bytes(b"\x00" * 10)


def test_file_info_from_file():
    header = FileHeader(LogType.ZERO_TO_100, LogFlag.ACC, 1307281259)
    info = FileInfo.from_file("DAT00012.LOG", 2048, header.to_bytes())
    assert info.file_index == 12
    assert info.file_size == 2048
    assert info.time == 1307281259
    assert info.log_type == LogType.ZERO_TO_100
    assert info.log_flags == LogFlag.ACC
    assert info.pid == CompactPid.MESSAGE
    assert info.message == Message.FILE_INFO
    raw = info.to_bytes()
    assert len(raw) == FILE_INFO_SIZE
    assert checksum(raw) == 0


def test_file_info_rejects_small_file():
    header = FileHeader().to_bytes()
    assert FileInfo.from_file("DAT00001.LOG", HEADER_LEN - 1, header) is None


def test_file_info_rejects_bad_name():
    header = FileHeader().to_bytes()
    assert FileInfo.from_file("DATABC.LOG", 4096, header) is None


def test_command_round_trip():
    cmd = Command(Message.FILE_REQUEST, b"\x05")
    raw = cmd.to_bytes()
    assert len(raw) == COMMAND_SIZE
    assert checksum(raw) == 0
    parsed = Command.from_bytes(raw)
    assert parsed == cmd
    assert parsed.data[:1] == b"\x05"
    assert parsed.pid == CompactPid.MESSAGE


def test_command_payload_too_long():
    with pytest.raises(ValueError):
        Command(Message.FILE_LIST_BEGIN, bytes(13))


def test_command_bad_checksum():
    raw = bytearray(Command(Message.FILE_LIST_END).to_bytes())
    raw[10] ^= 0xFF
    with pytest.raises(ValueError):
        Command.from_bytes(bytes(raw))


def test_command_wrong_length():
    with pytest.raises(ValueError):
        Command.from_bytes(Command(Message.FILE_LIST_END).to_bytes()[:-1])