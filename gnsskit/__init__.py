"""Parsers for GGA, RMC and GSA sentences, SBF header helpers and settings checks."""

__version__ = "0.1.0"

__all__ = [
    "baudrate",
    "framing",
    "gga",
    "gsa",
    "parsing",
    "rmc",
    "settings",
    "strings",
]