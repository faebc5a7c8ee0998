import logging

import pytest

import linear_controller
from linear_controller import linear_control, reset_linear


@pytest.fixture(autouse=True)
def fresh_lines():
    reset_linear()
    yield
    reset_linear()


def test_full_range():
    assert linear_control(90, 90) == (45.0, 6.0)
    assert linear_control(-90, 0) == (-45.0, 0.0)


def test_centre():
    assert linear_control(0, 45) == (0.0, 3.0)


def test_midpoints():
    assert linear_control(30, 15) == (15.0, 1.0)
    assert linear_control(-60, 60) == (-30.0, 4.0)


def test_out_of_range_is_limited():
    assert linear_control(200, 120) == (45.0, 6.0)
    assert linear_control(-200, -10) == (-45.0, 0.0)


def test_rounds_to_two_decimals():
    steering, speed = linear_control(1.234, 1)

    assert steering == 0.62
    assert speed == 0.07


def test_reset_restores_lines(caplog):
    linear_controller.steering_line.configure((0, 0), (1, 0), 0, 0)
    assert linear_control(90, 90)[0] == 0.0

    with caplog.at_level(logging.INFO, logger="linear_controller"):
        reset_linear()

    assert linear_control(90, 90) == (45.0, 6.0)
    assert "reset" in caplog.text
