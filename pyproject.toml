[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gnsskit"
version = "0.1.0"
description = "NMEA sentence parsers, SBF block helpers and receiver settings checks for GNSS receivers"
requires-python = ">=3.10"
dependencies = []
keywords = ["gnss", "gps", "nmea", "sbf", "gga", "rmc", "gsa", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["gnsskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
