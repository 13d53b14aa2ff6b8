[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fpdriver"
version = "5.0.0"
description = "Fixposition sensor output handling: GNSS frame transforms, GPS time, NMEA/NovAtel framing, NovAtel binary types and configuration"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["gnss", "ecef", "enu", "ned", "wgs84", "nmea", "novatel", "gps-time", "quaternion"]
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fpdriver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
