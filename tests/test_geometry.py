import math

import pytest

from roombot.geometry import PI, TWO_PI, saturate, wrap_heading


def test_saturate():
    left_sat, right_sat = saturate(600, 302, 500)
    assert left_sat == 500
    assert right_sat == 302


def test_saturate_negative():
    left_sat, right_sat = saturate(-600, -302, 500)
    assert left_sat == -500
    assert right_sat == -302


def test_saturate_within_limits_unchanged():
    assert saturate(120, -340, 500) == (120, -340)


def test_saturate_right_takes_sign_of_left():
    assert saturate(300, -600, 500) == (300, 500)


def test_wrap_heading():
    wrapped = wrap_heading(4.1 * TWO_PI)
    assert -PI < wrapped < PI


def test_wrap_heading_in_range_unchanged():
    assert wrap_heading(0.5) == 0.5


def test_wrap_heading_negative():
    assert wrap_heading(-4.0) == pytest.approx(-4.0 + TWO_PI)


def test_wrap_heading_rejects_infinite():
    with pytest.raises(ValueError):
        wrap_heading(math.inf)