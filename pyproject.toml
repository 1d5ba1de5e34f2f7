[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roombot"
version = "0.1.0"
description = "Serial Open Interface commands, sensor packet decoding and wheel odometry for Roomba robots"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = [
    "roomba",
    "robotics",
    "open-interface",
    "odometry",
    "serial",
    "sensor-decoding",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
    "Topic :: Terminals :: Serial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
roombot-list-ports = "roombot.tools:list_ports"

[tool.hatch.build.targets.wheel]
packages = ["roombot"]

[tool.hatch.build.targets.sdist]
include = [
    "roombot",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
