[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qrversions"
version = "0.1.0"
description = "QR code version tables: symbol sizes, codeword counts, alignment patterns, version information and data capacities"
requires-python = ">=3.10"
dependencies = []
keywords = ["qr", "qrcode", "version", "capacity", "barcode"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qrversions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
