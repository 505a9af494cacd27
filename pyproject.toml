[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nmeakit"
version = "0.1.0"
description = "Parsers for NMEA 0183 sentences: headings, satellites, weather, NMEA 2000 bridges and proprietary extensions"
requires-python = ">=3.10"
dependencies = []
keywords = ["nmea", "nmea0183", "nmea2000", "gnss", "marine", "parser"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nmeakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
