"""Data formats, packet codecs, bitmap fonts and KML conversion for OBD-II and GPS loggers."""

__version__ = "0.1.0"
__all__ = [
    "pids",
    "config",
    "packets",
    "textlogger",
    "binlogger",
    "kml",
    "fonts",
    "dosfonts",
]