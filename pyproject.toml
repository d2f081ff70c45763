[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "setuputil"
version = "0.1.0"
description = "Low-level helpers for binary installer data: integer math, byte order, typed flag sets, ANSI sequence parsing and value formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["endianness", "flags", "bitmask", "ansi", "binary", "formatting"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["setuputil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
