import io

import pytest

from obdlog.config import StreamFormat
from obdlog.packets import DataPacket
from obdlog.pids import Pid
from obdlog.textlogger import StreamLogger, TextLogger, next_log_path


def test_next_log_path_creates_folder(tmp_path):
    index, path = next_log_path(tmp_path, "DATA")
    assert index == 1
    assert path == tmp_path / "DATA" / "DAT00001.CSV"
    assert (tmp_path / "DATA").is_dir()


def test_next_log_path_skips_existing(tmp_path):
    _, first = next_log_path(tmp_path, "DATA")
    first.touch()
    index, path = next_log_path(tmp_path, "DATA")
    assert index == 2
    assert path.name == "DAT00002.CSV"


def test_next_log_path_date_time_name(tmp_path):
    (tmp_path / "DATA").mkdir()
    index, path = next_log_path(tmp_path, "DATA", 1020304)
    assert index == 1
    assert path.name == "01020304.CSV"


def test_text_logger_writes_file_and_stream(tmp_path):
    out = io.BytesIO()
    logger = TextLogger(out=out)
    assert logger.open_file(tmp_path) == 1
    logger.data_time = 1000
    logger.log_data(0x1A, 5)
    logger.data_time = 1250
    logger.log_data(0x1A, 6)
    logger.close_file()
    content = (tmp_path / "DATA" / "DAT00001.CSV").read_bytes()
    assert content == b"#1000,1A,5\n250,1A,6\n"
    assert out.getvalue() == b"1A,5\r\n1A,6\r\n"


def test_data_size_tracks_bytes_written(tmp_path):
    logger = TextLogger()
    logger.open_file(tmp_path)
    logger.data_time = 10
    logger.log_data(0x20, 1, 2, 3)
    size = logger.data_size
    logger.flush_file()
    assert size == len((tmp_path / "DATA" / "DAT00001.CSV").read_bytes())
    logger.close_file()
    assert logger.data_size == 0


def test_timestamp_absolute_after_a_minute():
    logger = TextLogger()
    logger.data_time = 5
    logger.log_pid(0x10)
    logger.data_time = 5 + 59999
    assert logger.timestamp(False) == "59999,"
    logger.data_time = 5 + 60000
    assert logger.timestamp(False) == f"#{5 + 60000},"


def test_log_coordinate_and_pid():
    out = io.BytesIO()
    logger = TextLogger(out=out)
    logger.log_coordinate(0xA, -33123456)
    logger.log_pid(0x80)
    assert out.getvalue() == b"A,-33.123456\r\n80,\r\n"


def test_log_data_rejects_two_values():
    with pytest.raises(TypeError):
        TextLogger().log_data(0x1A, 1, 2)


def test_cache_collects_and_purges():
    logger = TextLogger(cache_size=256)
    logger.data_time = 100
    logger.log_text("X")
    assert logger.cache.endswith("X ")
    assert logger.cache.startswith("#100,")
    logger.purge_cache()
    assert logger.cache == ""


def test_cache_full_drops_record():
    out = io.BytesIO()
    logger = TextLogger(out=out, cache_size=16)
    logger.log_text("ABCD")
    assert out.getvalue() == b""
    assert logger.cache == ""


def test_stream_logger_text_names(tmp_path):
    out = io.BytesIO()
    sleeps = []
    logger = StreamLogger(out=out, sleep=sleeps.append)
    assert logger.open_file(tmp_path) == 1
    logger.data_time = 100
    logger.log_data(Pid.ACC, 1, 2, 3)
    logger.close_file()
    assert out.getvalue() == b"ACC,1,2,3\r"
    assert (tmp_path / "FRMATICS" / "DAT00001.CSV").read_bytes() == b"100,ACC,1,2,3\r"
    assert sleeps == [0.01]


def test_stream_logger_csv_uses_hex(tmp_path):
    out = io.BytesIO()
    logger = StreamLogger(out=out, stream_format=StreamFormat.CSV, sleep=lambda s: None)
    logger.log_data(Pid.GPS_LATITUDE, 7)
    assert out.getvalue() == b"A,7\r"


def test_stream_logger_elapsed_from_open_time(tmp_path):
    logger = StreamLogger(sleep=lambda s: None)
    logger.open_file(tmp_path, date_time=400)
    logger.data_time = 1000
    logger.log_data(Pid.GPS_SPEED, 12)
    logger.close_file()
    content = (tmp_path / "FRMATICS" / "DAT00001.CSV").read_bytes()
    assert content == b"600,SPD,12\r"
    assert logger.data_size == len(content)


def test_stream_logger_binary_packet():
    out = io.BytesIO()
    logger = StreamLogger(out=out, stream_format=StreamFormat.BIN, sleep=lambda s: None)
    logger.data_time = 42
    logger.log_data(0x10D, 88)
    packet = DataPacket.from_bytes(out.getvalue())
    assert packet == DataPacket(42, 0x10D, (88.0,))


def test_log_char_skips_control(tmp_path):
    logger = StreamLogger(sleep=lambda s: None)
    logger.open_file(tmp_path)
    logger.log_char("a")
    logger.log_char("\n")
    logger.close_file()
    assert (tmp_path / "FRMATICS" / "DAT00001.CSV").read_bytes() == b"a"
    assert logger.data_size == 1