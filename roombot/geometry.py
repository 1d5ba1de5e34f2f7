"""Robot model constants, heading wrapping and wheel command saturation."""

import math

PI = math.pi
TWO_PI = 6.28318
EPSILON = 0.0001

WHEEL_DIAMETER = 0.072  # m
AXLE_LENGTH = 0.235  # m
MAX_ENCODER_TICKS = 65535
TICKS_PER_REV = 508.8
MAX_VELOCITY = 0.50  # m/s


def wrap_heading(yaw: float) -> float:
    """Bring a heading into the range [-pi, pi]."""
    if not math.isfinite(yaw):
        raise ValueError(f"heading must be finite, got {yaw!r}")
    angle = yaw
    while angle < -math.pi:
        angle += TWO_PI
    while angle > math.pi:
        angle -= TWO_PI
    return angle


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def saturate(left_cmd: int, right_cmd: int, limit: int) -> tuple[int, int]:
    """Clamp wheel commands to +/- limit.

    A saturated right command takes the sign of the (already saturated)
    left command.
    """
    if abs(left_cmd) > limit:
        left_cmd = limit * _sign(left_cmd)
    if abs(right_cmd) > limit:
        right_cmd = limit * _sign(left_cmd)
    return left_cmd, right_cmd