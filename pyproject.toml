[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyplace"
version = "0.9.10"
description = "Positional astronomy routines: air mass, mount kinematics, apparent-to-mean place, sidereal time, nutation series terms and calendar dates"
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "astrometry", "nutation", "sidereal time", "airmass", "altazimuth", "julian date"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skyplace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
