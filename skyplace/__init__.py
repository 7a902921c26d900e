"""Positional astronomy: air mass, mount kinematics, apparent places, sidereal time, nutation terms and calendar dates."""

__version__ = "0.9.10"

__all__ = [
    "airmass",
    "apparent",
    "calendar",
    "mount",
    "nutation_arguments",
    "nutation_longitude",
    "nutation_obliquity",
    "sidereal",
    "vectors",
]