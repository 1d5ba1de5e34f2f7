"""Roomba serial Open Interface commands, sensor packet decoding and wheel odometry."""

__version__ = "0.1.0"