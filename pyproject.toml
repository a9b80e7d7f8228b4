[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ethwords"
version = "0.1.0"
description = "Bit-exact models of Ethernet/IPv4/UDP addresses, protocol numbers, Internet checksums and the Ethernet CRC-32"
requires-python = ">=3.10"
dependencies = []
keywords = ["ethernet", "crc32", "fcs", "checksum", "udp", "ipv4"]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ethwords"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
