[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lpgen"
version = "0.1.0"
description = "Segment-based level pattern generator for LEDs, buzzers and other on/off outputs, with a terminal simulator"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "blink", "pattern", "embedded", "waveform", "simulator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lpgen-sim = "lpgen.sim:main"

[tool.hatch.build.targets.wheel]
packages = ["lpgen"]

[tool.pytest.ini_options]
addopts = "-ra"
