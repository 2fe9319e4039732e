import dataclasses

import pytest

from obdlog.config import StreamFormat, preset


def test_bikelogger():
    cfg = preset("bikelogger")
    assert cfg.stream_baudrate == 115200
    assert cfg.lcd == "SSD1289"
    assert cfg.sd_cs_pin == "SS"
    assert cfg.log_format is StreamFormat.CSV
    assert cfg.gps_data_timeout == 2000


def test_datalogger():
    cfg = preset("datalogger")
    assert cfg.stream_format is StreamFormat.TEXT
    assert cfg.max_log_file_size == 1024
    assert cfg.acc_data_ratio == 172
    assert cfg.gyro_data_ratio == 256
    assert cfg.start_motion_threshold == 10000
    assert cfg.use_gps is False


def test_gpslogger():
    cfg = preset("gpslogger")
    assert cfg.use_softserial is True
    assert cfg.stream_baudrate == 9600
    assert cfg.gps_baudrate == 115200
    assert cfg.use_mpu6050 is True


def test_nano_variants_do_not_log():
    for name in ("nanologger", "nanotimer"):
        cfg = preset(name)
        assert cfg.enable_data_log is False
        assert cfg.enable_data_out is False
        assert cfg.lcd == "SH1106"


def test_dataplayer():
    cfg = preset("dataplayer")
    assert cfg.lcd == "ILI9341"
    assert cfg.obd_model == "UART"
    assert cfg.enable_data_out is True
    assert cfg.enable_data_log is False


def test_unknown_preset():
    with pytest.raises(KeyError):
        preset("nosuchlogger")


def test_config_is_immutable():
    cfg = preset("bikelogger")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.stream_baudrate = 1
    assert cfg.stream_baudrate == 115200
    assert preset("bikelogger").stream_baudrate == 115200


def test_preset_stable():
    assert preset("datalogger") == preset("datalogger")
    assert preset("nanologger") != preset("dataplayer")