"""Wheel-encoder odometry with covariance propagation."""

import math
from dataclasses import dataclass, field

from roombot.geometry import (
    AXLE_LENGTH,
    EPSILON,
    MAX_ENCODER_TICKS,
    TICKS_PER_REV,
    WHEEL_DIAMETER,
    wrap_heading,
)
from roombot.matrix import (
    covar_to_matrix3,
    mat_multiply_3x2_2x2_2x3,
    mat_multiply_3x3_3x3_3x3,
    matrix3_to_covar,
)
from roombot.timer import Timer

_MAX = MAX_ENCODER_TICKS
_MAX_95 = int(0.95 * _MAX)
_MIN_05 = int(0.05 * _MAX)
_TIMESTAMP = (100, 100)  # (seconds, nanos)


@dataclass
class PoseWithCovariance:
    x: float = 0.0
    y: float = 0.0
    yaw: float = 0.0
    covariance: list[float] = field(default_factory=lambda: [1e-9] * 9)


@dataclass
class TwistWithCovariance:
    x: float = 0.0
    y: float = 0.0
    yaw: float = 0.0
    covariance: list[float] = field(default_factory=lambda: [0.0] * 9)


@dataclass
class Pose:
    x: float
    y: float
    yaw: float
    covariance: list[float]


@dataclass
class Twist:
    x: float
    y: float
    yaw: float
    covariance: list[float]


@dataclass
class Odometry:
    """Odometry message: timestamp as (seconds, nanos), pose and velocity."""

    timestamp: tuple[int, int]
    pose: Pose
    vel: Twist


def _delta_ticks(curr: int, prev: int) -> int:
    if curr < _MIN_05 and prev > _MAX_95:
        return (_MAX - prev) + curr
    if curr > _MAX_95 and prev < _MIN_05:
        return (curr - _MAX) - prev
    return curr - prev


def _ticks_to_distance(ticks: int) -> float:
    return (ticks / TICKS_PER_REV) * WHEEL_DIAMETER * math.pi


class OdometryStamped:
    """Dead-reckoning pose and velocity estimate from encoder counts."""

    def __init__(
        self,
        init_left_ticks: int = 0,
        init_right_ticks: int = 0,
        timer: Timer | None = None,
    ) -> None:
        self.timer = timer if timer is not None else Timer()
        self.pose = PoseWithCovariance()
        self.vel = TwistWithCovariance()
        self.left_wheel_dist = 0.0
        self.right_wheel_dist = 0.0
        self._prev_ticks_left = init_left_ticks
        self._prev_ticks_right = init_right_ticks

    def wrap_encoders(self, curr_ticks_left: int, curr_ticks_right: int) -> tuple[int, int]:
        """Return tick deltas since the last call, accounting for counter roll-over."""
        delta_left = _delta_ticks(curr_ticks_left, self._prev_ticks_left)
        delta_right = _delta_ticks(curr_ticks_right, self._prev_ticks_right)
        self._prev_ticks_left = curr_ticks_left
        self._prev_ticks_right = curr_ticks_right
        return delta_left, delta_right

    def compute_odom(self, curr_ticks_left: int, curr_ticks_right: int) -> Odometry:
        """Update the estimate from new encoder counts and return it as a message."""
        dt = self.timer.get_dt()
        delta_ticks_left, delta_ticks_right = self.wrap_encoders(
            curr_ticks_left, curr_ticks_right
        )

        delta_left = _ticks_to_distance(delta_ticks_left)
        delta_right = _ticks_to_distance(delta_ticks_right)
        self.left_wheel_dist += delta_left
        self.right_wheel_dist += delta_right

        ds = (delta_right + delta_left) / 2.0
        ds_2b = ds / (2.0 * AXLE_LENGTH)
        dyaw = (delta_right - delta_left) / AXLE_LENGTH
        c_yaw = math.cos(self.pose.yaw + dyaw / 2.0)
        s_yaw = math.sin(self.pose.yaw + dyaw / 2.0)
        dx = ds * c_yaw
        dy = ds * s_yaw

        new_x = self.pose.x + dx
        new_y = self.pose.y + dy
        new_yaw = self.pose.yaw + dyaw

        if dt > EPSILON:
            vel_x, vel_y, vel_yaw = ds / dt, 0.0, dyaw / dt
        else:
            vel_x, vel_y, vel_yaw = 0.0, 0.0, 0.0

        kr = kl = 1.0
        vel_covar = ((kr * abs(delta_right), 0.0), (0.0, kl * abs(delta_left)))
        inv_axle = 1.0 / AXLE_LENGTH
        vel_jacob = (
            (c_yaw / 2.0 - ds_2b * s_yaw, c_yaw / 2.0 + ds_2b * s_yaw),
            (s_yaw / 2.0 + ds_2b * c_yaw, s_yaw / 2.0 - ds_2b * c_yaw),
            (inv_axle, -inv_axle),
        )
        vel_covar_est = mat_multiply_3x2_2x2_2x3(vel_jacob, vel_covar)

        pose_jacob = (
            (1.0, 0.0, -dy),
            (0.0, 1.0, dx),
            (0.0, 0.0, 1.0),
        )
        pose_covar = covar_to_matrix3(self.pose.covariance)
        pose_covar_est = mat_multiply_3x3_3x3_3x3(pose_jacob, pose_covar)

        self.pose.x = new_x
        self.pose.y = new_y
        self.pose.yaw = wrap_heading(new_yaw)
        self.pose.covariance = matrix3_to_covar(pose_covar_est)
        self.vel.x = vel_x
        self.vel.y = vel_y
        self.vel.yaw = vel_yaw
        self.vel.covariance = matrix3_to_covar(vel_covar_est)

        return self.to_message()

    def to_message(self) -> Odometry:
        """Snapshot the current estimate as an Odometry message."""
        return Odometry(
            timestamp=_TIMESTAMP,
            pose=Pose(
                x=self.pose.x,
                y=self.pose.y,
                yaw=self.pose.yaw,
                covariance=list(self.pose.covariance),
            ),
            vel=Twist(
                x=self.vel.x,
                y=self.vel.y,
                yaw=self.vel.yaw,
                covariance=list(self.vel.covariance),
            ),
        )