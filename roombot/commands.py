"""Serial commands that start, stop and drive the robot."""

import logging
import math
import struct
import time

import serial
import serial.tools.list_ports

from roombot.geometry import AXLE_LENGTH, saturate

logger = logging.getLogger(__name__)

# Open Interface opcodes and modes
START = 128
PASSIVE_MODE = 128
SAFE_MODE = 131
FULL = 132
STOP = 173
DRIVE = 137
DRIVE_DIRECT = 145

BAUD_RATE = 115_200
PORT_TIMEOUT = 0.03  # s
WHEEL_COMMAND_LIMIT = 500  # mm/s

_I16_MIN = -32768
_I16_MAX = 32767


def _open_first_port(timeout: float | None) -> serial.Serial:
    """Open the first serial port the system reports."""
    ports = serial.tools.list_ports.comports()
    if not ports:
        raise serial.SerialException("No serial port")
    return serial.Serial(ports[0].device, BAUD_RATE, timeout=timeout)


def _command(opcode: int, first: int, second: int) -> bytes:
    try:
        return struct.pack(">Bhh", opcode, first, second)
    except struct.error as exc:
        raise ValueError(
            f"command arguments must be 16-bit signed integers, got {first!r}, {second!r}"
        ) from exc


def _send(port, command: bytes, what: str) -> bytes:
    try:
        port.write(command)
    except OSError as exc:
        logger.error("writing %s failed due to error: %s", what, exc)
    return command


def _to_i16(value: float) -> int:
    """Round half away from zero and clamp into the signed 16-bit range."""
    if math.isnan(value):
        return 0
    clamped = min(max(value, float(_I16_MIN)), float(_I16_MAX))
    return int(math.copysign(math.floor(abs(clamped) + 0.5), clamped))


def drive(velocity: int, radius: int, port) -> bytes:
    """Send a Drive command (velocity in mm/s, radius in mm); return the bytes sent."""
    return _send(port, _command(DRIVE, velocity, radius), "drive commands")


def drive_direct(left_velocity: int, right_velocity: int, port) -> bytes:
    """Send a Drive Direct command with per-wheel velocities in mm/s.

    The right wheel velocity goes on the wire first.
    """
    command = _command(DRIVE_DIRECT, right_velocity, left_velocity)
    return _send(port, command, "drive direct commands")


def drive_velocity(x_vel: float, ang_vel: float, port) -> bytes:
    """Drive with a forward velocity (m/s) and an angular velocity (rad/s)."""
    left_vel = x_vel - (AXLE_LENGTH / 2.0) * ang_vel
    right_vel = x_vel + (AXLE_LENGTH / 2.0) * ang_vel

    left_cmd = _to_i16(left_vel * 1000.0)
    right_cmd = _to_i16(right_vel * 1000.0)

    left_sat, right_sat = saturate(left_cmd, right_cmd, WHEEL_COMMAND_LIMIT)
    return drive_direct(left_sat, right_sat, port)


def startup() -> serial.Serial:
    """Open the first serial port, start the robot and put it in full mode."""
    port = _open_first_port(PORT_TIMEOUT)
    port.flush()
    _send(port, bytes([START]), "start command")
    logger.info("Starting")
    time.sleep(1.0)
    logger.info("Setting mode")
    _send(port, bytes([FULL]), "mode command")
    time.sleep(1.0)
    return port


def shutdown(port) -> None:
    """Stop the robot and close the port."""
    _send(port, bytes([STOP]), "stop command")
    logger.info("Stopping")
    time.sleep(0.5)
    port.close()