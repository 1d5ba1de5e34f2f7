import copy
import sys

import pytest

from roombot.odometry import OdometryStamped
from roombot.timer import Timer

EPS = sys.float_info.epsilon


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_odom(left, right):
    clock = FakeClock()
    return OdometryStamped(left, right, timer=Timer(clock=clock)), clock


def test_odometry_init():
    odom = OdometryStamped(0, 0)
    assert odom.wrap_encoders(100, 100) == (100, 100)


def test_encoder_wrapping_forward():
    odom = OdometryStamped(65500, 65500)
    assert odom.wrap_encoders(200, 200) == (235, 235)


def test_encoder_wrapping_backward():
    odom = OdometryStamped(200, 200)
    assert odom.wrap_encoders(65500, 65500) == (-235, -235)


def test_encoder_wrapping_backward_then_forward():
    odom = OdometryStamped(200, 200)
    assert odom.wrap_encoders(65500, 65500) == (-235, -235)
    assert odom.wrap_encoders(200, 200) == (235, 235)


def test_compute_odom_driving_straight():
    odom, clock = make_odom(200, 200)
    clock.advance(0.5)
    odom.compute_odom(1200, 1200)

    prev = copy.deepcopy(odom)
    assert prev.pose.y - EPS < 1e-8
    assert prev.pose.yaw - EPS < 1e-8
    assert prev.vel.y - EPS < 1e-8
    assert prev.vel.yaw - EPS < 1e-8
    assert prev.vel.x > prev.pose.x

    clock.advance(0.5)
    odom.compute_odom(1400, 1400)
    assert odom.pose.x > prev.pose.x
    assert odom.vel.x < prev.vel.x


def test_compute_odom_driving_counter_clockwise():
    odom, clock = make_odom(200, 200)
    clock.advance(0.5)
    odom.compute_odom(1200, 2000)

    assert odom.pose.y > 0.4
    assert odom.pose.yaw > 1.5
    assert odom.vel.y - EPS < 1e-8
    assert odom.vel.yaw > 3.0


def test_compute_odom_driving_180_clockwise():
    odom, clock = make_odom(200, 200)
    clock.advance(1.0)
    odom.compute_odom(3800, 2200)

    assert odom.pose.y < -1.0
    assert odom.pose.yaw < -3.0
    assert odom.vel.y - EPS < 1e-8
    assert odom.vel.yaw < -3.0

    clock.advance(0.3)
    odom.compute_odom(3900, 2200)
    assert odom.pose.yaw > 0.0

    clock.advance(1.0)
    odom.compute_odom(6900, 5200)
    assert odom.pose.x < -1.0
    assert odom.pose.y < -1.0
    assert odom.pose.yaw > 0.0


def test_compute_odom_driving_forward_then_backward():
    odom, clock = make_odom(200, 200)
    clock.advance(1.0)
    odom.compute_odom(1000, 1000)
    assert odom.pose.x > 0.3

    clock.advance(3.0)
    odom.compute_odom(64000, 64000)
    assert odom.pose.x < -0.7


def test_compute_odom_with_real_timer():
    odom = OdometryStamped(200, 200)
    message = odom.compute_odom(1200, 1200)
    assert message.pose.x > 0.4
    assert message.pose.y == pytest.approx(0.0)


def test_zero_dt_gives_zero_velocity():
    odom, _ = make_odom(0, 0)
    odom.compute_odom(500, 500)
    assert odom.vel.x == 0.0
    assert odom.vel.yaw == 0.0
    assert odom.pose.x > 0.0


def test_message_mirrors_state():
    odom, clock = make_odom(0, 0)
    clock.advance(0.5)
    message = odom.compute_odom(300, 500)
    assert message.timestamp == (100, 100)
    assert message.pose.x == odom.pose.x
    assert message.pose.yaw == odom.pose.yaw
    assert message.vel.x == odom.vel.x
    assert message.pose.covariance == odom.pose.covariance
    assert len(message.vel.covariance) == 9


def test_velocity_covariance_is_symmetric():
    odom, clock = make_odom(0, 0)
    clock.advance(0.5)
    odom.compute_odom(300, 700)
    c = odom.vel.covariance
    assert c[1] == pytest.approx(c[3])
    assert c[2] == pytest.approx(c[6])
    assert c[5] == pytest.approx(c[7])


def test_initial_message():
    odom = OdometryStamped()
    message = odom.to_message()
    assert message.pose.covariance == [1e-9] * 9
    assert message.vel.covariance == [0.0] * 9
    assert (message.pose.x, message.pose.y, message.pose.yaw) == (0.0, 0.0, 0.0)