[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "obdlog"
version = "0.1.0"
description = "Vehicle and GPS data logging formats, packet codecs and KML track conversion"
requires-python = ">=3.10"
dependencies = []
keywords = ["obd", "obd-ii", "gps", "kml", "data-logger", "telematics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
data2kml = "obdlog.kml:main"

[tool.hatch.build.targets.wheel]
packages = ["obdlog"]

[tool.pytest.ini_options]
addopts = "-ra"
