# obdlog

Tools for the data formats of small OBD-II and GPS data loggers. With this
package you can write their text and binary logs and encode and decode their
binary packets. It can also turn a recorded CSV log into a KML track for
Google Earth.

## Installation

```
pip install .
```

To run the test suite with pytest, install the `test` extra: `pip install .[test]`.

## Converting a log to KML

```
data2kml INPUT [OUTPUT] [START] [END]
```

- `INPUT`: a CSV log recorded by a logger.
- `OUTPUT`: the KML file to write. It defaults to `INPUT.kml`.
- `START`: a start time in seconds. It is accepted but not applied.
- `END`: an end time in seconds. When it is given and not zero, processing
  stops after the first record past this time.

With no arguments the command prints its usage and exits with status 1.

The KML file is created when the first record is read. It begins with the
contents of `kmlhead.txt` from the current directory. If that file cannot be
read, the file begins without it. The converter writes `<when>` and
`<gx:coord>` entries, then a closing section that holds:

- extended-data arrays: speed, rpm, gear, coolant, intake, load, thr, alt,
  acc and ts;
- a placemark for each braking point it finds;
- the closing `</Folder></Document></kml>` tags.

If the log holds no records, no KML file is created.

The same conversion from Python:

```python
from obdlog.kml import convert_to_kml

track = convert_to_kml("DAT00001.CSV", "trip.kml", 0, 0, "kmlhead.txt")
if track is not None:
    print(len(track.points), "track points")
```

`read_records(lines)` yields `(timestamp, pid, value)` tuples from the lines
of a log. `KmlTrack(out)` builds a track on any text stream through `add`
and `write_tail`.

## Writing logs

```python
import io
from obdlog.textlogger import TextLogger

out = io.BytesIO()
logger = TextLogger(out=out)
logger.data_time = 1000
logger.log_data(0x10C, 850)
print(out.getvalue())  # b'10C,850\r\n'
```

`TextLogger.open_file(root)` opens the next free file in `root/DATA`.
`StreamLogger.open_file(root)` and `BinaryLogger.open_file(root, ...)` both
use `root/FRMATICS`. Each of these returns the index of the file it opened.

## Modules

- `obdlog.pids`: the PID constants `Pid` and `CompactPid`, plus
  `pid_name`, `pid_from_name` and `format_pid` for the three-letter names.
- `obdlog.config`: `StreamFormat`, `LoggerConfig`, and `preset(name)` for
  the variants `bikelogger`, `datalogger`, `gpslogger`, `nanologger`,
  `nanotimer` and `dataplayer`.
- `obdlog.packets`: the binary records `DataPacket`, `FileHeader`,
  `FileInfo` and `Command`, the enums `LogType`, `LogFlag` and `Message`,
  and the XOR `checksum`.
- `obdlog.textlogger`:
  - `TextLogger` writes relative or `#`-absolute timestamps and can keep an
    optional bounded cache.
  - `StreamLogger` ends each record with CR and can stream text, CSV or
    binary packets.
  - `next_log_path` picks the next free file name.
- `obdlog.binlogger`: `BinaryLogger` writes binary (`.LOG`) or CSV logs. It
  also sends file information and commands and reads commands back.
- `obdlog.kml`: `hex_to_uint16`, `read_records`, `TrackPoint`, `KmlTrack`,
  `convert_to_kml` and the `main` command entry.
- `obdlog.fonts`: `glyph_5x8`, `digit_glyph` (sizes 16x24, 16x16 and 8x8)
  and `icon` (`tick` and `cross`).
- `obdlog.dosfonts`: `glyph_8x16`, in the `doslike` or `terminal` style.

## What it does not do

This package does not talk to devices. It does not read OBD-II adapters or
GPS receivers, it drives no serial ports, SD cards or displays, and it does
no on-device logging. The loggers write to file-like objects and to folders
on the local file system. The fonts are returned as raw bytes and are not
drawn.