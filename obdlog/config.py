"""Build-time options of the logger variants, as named presets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class StreamFormat(IntEnum):
    """Encoding of logged or streamed records."""

    BIN = 0
    CSV = 1
    TEXT = 2


@dataclass(frozen=True)
class LoggerConfig:
    """Options of one logger variant; ``None`` means the variant leaves it unset."""

    enable_data_out: bool
    enable_data_log: bool
    use_softserial: bool = False
    log_format: StreamFormat | None = None
    stream_format: StreamFormat | None = None
    stream_baudrate: int | None = None
    sd_cs_pin: int | str | None = None
    lcd: str | None = None
    use_mpu6050: bool = False
    use_gps: bool = False
    gps_baudrate: int | None = None
    gps_data_timeout: int | None = None  # ms
    debug_baudrate: int | None = None
    enable_data_cache: bool = False
    max_cache_size: int | None = None  # bytes
    max_log_file_size: int | None = None  # KB
    obd_attempt_time: int | None = None  # seconds, 0 for forever
    acc_data_ratio: int | None = None
    gyro_data_ratio: int | None = None
    compass_data_ratio: int | None = None
    start_motion_threshold: int | None = None
    obd_model: str | None = None
    obd_protocol: int | None = None
    mode_default: str | None = None


_PRESETS: dict[str, LoggerConfig] = {
    "bikelogger": LoggerConfig(
        enable_data_out=True,
        enable_data_log=True,
        use_softserial=False,
        log_format=StreamFormat.CSV,
        stream_format=StreamFormat.CSV,
        stream_baudrate=115200,
        sd_cs_pin="SS",
        lcd="SSD1289",
        use_mpu6050=False,
        gps_baudrate=38400,
        gps_data_timeout=2000,
        debug_baudrate=9600,
    ),
    "datalogger": LoggerConfig(
        enable_data_out=True,
        enable_data_log=True,
        enable_data_cache=False,
        max_cache_size=256,
        stream_format=StreamFormat.TEXT,
        stream_baudrate=115200,
        max_log_file_size=1024,
        obd_attempt_time=0,
        sd_cs_pin=10,
        use_mpu6050=True,
        acc_data_ratio=172,
        gyro_data_ratio=256,
        compass_data_ratio=8,
        use_gps=False,
        gps_baudrate=115200,
        start_motion_threshold=10000,
    ),
    "gpslogger": LoggerConfig(
        enable_data_out=True,
        enable_data_log=True,
        use_softserial=True,
        stream_format=StreamFormat.TEXT,
        stream_baudrate=9600,
        sd_cs_pin="SS",
        gps_baudrate=115200,
        use_mpu6050=True,
    ),
    "nanologger": LoggerConfig(
        enable_data_out=False,
        enable_data_log=False,
        use_softserial=False,
        log_format=StreamFormat.CSV,
        sd_cs_pin=10,
        lcd="SH1106",
        debug_baudrate=9600,
    ),
    "nanotimer": LoggerConfig(
        enable_data_out=False,
        enable_data_log=False,
        use_softserial=False,
        log_format=StreamFormat.CSV,
        sd_cs_pin=10,
        lcd="SH1106",
        debug_baudrate=9600,
    ),
    "dataplayer": LoggerConfig(
        obd_model="UART",
        obd_protocol=0,
        enable_data_out=True,
        enable_data_log=False,
        use_softserial=True,
        log_format=StreamFormat.CSV,
        mode_default="LOGGER",
        sd_cs_pin=10,
        use_gps=False,
        gps_baudrate=38400,
        lcd="ILI9341",
        use_mpu6050=False,
        gps_data_timeout=2000,
        debug_baudrate=9600,
    ),
}


def preset(name: str) -> LoggerConfig:
    """Return the configuration of the named logger variant."""
    try:
        return _PRESETS[name]
    except KeyError:
        known = ", ".join(sorted(_PRESETS))
        raise KeyError(f"unknown preset {name!r}; known presets: {known}") from None