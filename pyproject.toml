[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "speedwire"
version = "0.1.0"
description = "Building blocks for SMA speedwire energy meters and inverters: byte encoding, address handling, logging, measurement types, OBIS identifiers, averaging and local host information."
requires-python = ">=3.10"
keywords = ["speedwire", "sma", "emeter", "inverter", "obis", "energy", "photovoltaic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["speedwire"]

[tool.pytest.ini_options]
addopts = "-ra"
