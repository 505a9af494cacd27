"""Parsers for NMEA 0183 sentences and their proprietary and NMEA 2000 extensions."""

__version__ = "0.1.0"
__all__ = ["constants", "parser", "nmea2000", "navigation", "environment", "proprietary"]