"""Parameter identifiers (PIDs) carried in logged and streamed records."""

from __future__ import annotations

from enum import IntEnum


class Pid(IntEnum):
    """PIDs used by the CSV/text loggers and the KML converter."""

    GPS_LATITUDE = 0xA
    GPS_LONGITUDE = 0xB
    GPS_ALTITUDE = 0xC
    GPS_SPEED = 0xD
    GPS_HEADING = 0xE
    GPS_SAT_COUNT = 0xF
    GPS_TIME = 0x10
    GPS_DATE = 0x11

    ACC = 0x20
    GYRO = 0x21
    COMPASS = 0x22
    MEMS_TEMP = 0x23
    BATTERY_VOLTAGE = 0x24

    DATA_SIZE = 0x80

    RPM = 0x10C
    SPEED = 0x10D
    THROTTLE = 0x111
    ENGINE_LOAD = 0x104
    COOLANT_TEMP = 0x105
    INTAKE_TEMP = 0x10F
    MAF_FLOW = 0x110
    ABS_ENGINE_LOAD = 0x143
    AMBIENT_TEMP = 0x146
    FUEL_PRESSURE = 0x10A
    INTAKE_PRESSURE = 0x10B
    BAROMETRIC = 0x133
    TIMING_ADVANCE = 0x10E
    FUEL_LEVEL = 0x12F
    RUNTIME = 0x11F
    DISTANCE = 0x131

    STAT_0_60 = 0xF100
    STAT_0_100 = 0xF101
    STAT_0_160 = 0xF102
    STAT_0_400 = 0xF103
    STAT_CUR_LAP = 0xF110
    STAT_LAST_LAP = 0xF111
    STAT_BEST_LAP = 0xF112
    STAT_LAP_PROGRESS = 0xF113

    STAT_DISTANCE = 0xF200
    STAT_TRIP_TIME = 0xF201
    STAT_WAIT_TIME = 0xF202
    STAT_SPEED_MAX = 0xF203
    STAT_SPEED_AVG = 0xF204
    STAT_RPM_MAX = 0xF205
    STAT_RPM_MIN = 0xF206
    STAT_RPM_AVG = 0xF207
    STAT_INTAKE_MAX = 0xF208
    STAT_INTAKE_MIN = 0xF209
    STAT_INTAKE_SUM = 0xF20A
    STAT_ACC_FORWARD = 0xF20B
    STAT_ACC_BACKWARD = 0xF20C

    COMMAND = 0xFFFE
    SYNC = 0xFFFF


class CompactPid(IntEnum):
    """PIDs used by the binary loggers and their message protocol."""

    GPS_COORDINATES = 0xF00A
    GPS_ALTITUDE = 0xF00C
    GPS_SPEED = 0xF00D
    GPS_HEADING = 0xF00E
    GPS_SAT_COUNT = 0xF00F
    GPS_TIME = 0xF010
    ACC = 0xF020
    GYRO = 0xF021
    MESSAGE = 0xFE00
    HEART_BEAT = 0xFFEE


# Three-letter names written by the text-format loggers.
_WRITTEN_NAMES: dict[int, str] = {
    Pid.ACC: "ACC",
    Pid.GYRO: "GYR",
    Pid.COMPASS: "MAG",
    Pid.GPS_LATITUDE: "LAT",
    Pid.GPS_LONGITUDE: "LON",
    Pid.GPS_ALTITUDE: "ALT",
    Pid.GPS_SPEED: "SPD",
    Pid.GPS_HEADING: "CRS",
    Pid.GPS_SAT_COUNT: "SAT",
    Pid.GPS_TIME: "TIM",
    Pid.GPS_DATE: "DTE",
    Pid.BATTERY_VOLTAGE: "BAT",
    Pid.DATA_SIZE: "DAT",
}

# Three-letter names understood when reading logs back.
_READ_NAMES: dict[str, Pid] = {
    "DTE": Pid.GPS_DATE,
    "UTC": Pid.GPS_TIME,
    "LAT": Pid.GPS_LATITUDE,
    "LNG": Pid.GPS_LONGITUDE,
    "ALT": Pid.GPS_ALTITUDE,
    "SPD": Pid.GPS_SPEED,
    "CRS": Pid.GPS_HEADING,
    "SAT": Pid.GPS_SAT_COUNT,
    "ACC": Pid.ACC,
    "GYR": Pid.GYRO,
    "MAG": Pid.COMPASS,
    "BAT": Pid.BATTERY_VOLTAGE,
}


def pid_name(pid: int) -> str | None:
    """Return the three-letter name a text logger writes for ``pid``, if any."""
    return _WRITTEN_NAMES.get(pid)


def pid_from_name(name: str) -> Pid | None:
    """Return the PID a log reader assigns to a three-letter name, if any."""
    return _READ_NAMES.get(name)


def format_pid(pid: int, use_names: bool) -> str:
    """Render ``pid`` as a record field: its short name or upper-case hex."""
    if not 0 <= pid <= 0xFFFF:
        raise ValueError(f"PID out of range: {pid}")
    if use_names:
        name = pid_name(pid)
        if name is not None:
            return name
    return f"{pid:X}"