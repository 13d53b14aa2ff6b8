"""Fixposition sensor output: GNSS transforms, rotations, GPS time, NMEA/NovAtel framing, binary types and settings."""

__version__ = "5.0.0"