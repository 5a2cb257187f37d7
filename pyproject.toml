[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hydrixkit"
version = "0.1.0"
description = "Models of low-level utilities: integer and series-based float math, two-half wide integers, an LCG, text formatting, bitmap stretching, boot protocol records, byte-buffer helpers, an RTC clock, PS/2 mouse packet decoding and a first-fit heap."
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "uint128", "lcg", "heap", "rtc", "bcd", "ps2", "bitmap", "boot protocol"]
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
packages = ["hydrixkit"]

[tool.pytest.ini_options]
addopts = "-ra"
