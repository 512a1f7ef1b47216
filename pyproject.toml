[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbclib"
version = "0.1.0"
description = "C-style runtime routines for 8-bit handheld development: 32-bit arithmetic, strings, BCD, a hunk heap, formatting and a sound register model"
requires-python = ">=3.10"
dependencies = []
keywords = ["libc", "bcd", "malloc", "printf", "scanf", "sound", "retro", "8-bit"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gbclib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
