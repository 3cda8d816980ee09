[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hydrix"
version = "0.1.0"
description = "Small runtime helpers: integer and float math, lane-wise wide integers, number formatting, a simulated heap, byte-buffer primitives and an RTC clock model"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "heap", "rtc", "cmos", "formatting", "bitmap", "scancodes"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hydrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
