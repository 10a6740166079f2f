"""Tests for gimbal parameter models."""

import math

import pytest

from siyi_gimbal.models.gimbal import (
    CenterPos,
    ControlAngles,
    GimbalMode,
    ZoomFactor,
    ZoomMode,
    clamp,
)


def test_zoom_from_float():
    zoom = ZoomFactor.from_float(4.5)
    assert zoom.integer == 4
    assert zoom.fraction == 5


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.0, (1, 0)),
        (4.3, (4, 3)),
        (12.99, (12, 9)),
        (30.0, (30, 0)),
        (0.3, (1, 3)),
        (0.0, (1, 0)),
        (-5.7, (1, 0)),
        (99.9, (30, 9)),
        (1000.0, (30, 0)),
    ],
)
def test_zoom_from_float_saturates(value, expected):
    zoom = ZoomFactor.from_float(value)
    assert (zoom.integer, zoom.fraction) == expected


def test_zoom_non_finite_input():
    assert ZoomFactor.from_float(math.nan) == ZoomFactor(1, 0)
    assert ZoomFactor.from_float(math.inf) == ZoomFactor(30, 9)
    assert ZoomFactor.from_float(-math.inf) == ZoomFactor(1, 0)


def test_zoom_components_always_in_range():
    value = -3.0
    while value < 40.0:
        zoom = ZoomFactor.from_float(value)
        assert 1 <= zoom.integer <= 30
        assert 0 <= zoom.fraction <= 9
        value += 0.37


def test_zoom_constructor_clamps():
    assert ZoomFactor(0, 12) == ZoomFactor(1, 9)
    assert ZoomFactor(31, -1) == ZoomFactor(30, 0)


def test_zoom_is_immutable():
    zoom = ZoomFactor.from_float(2.5)
    with pytest.raises(AttributeError):
        zoom.integer = 3


def test_zoom_float_and_repr():
    zoom = ZoomFactor.from_float(4.5)
    assert float(zoom) == 4.5
    assert repr(zoom) == "ZoomFactor(4.5x)"


def test_enum_wire_values():
    assert ZoomMode.ZOOM_IN == 1
    assert ZoomMode.STOP_ZOOM == 0
    assert ZoomMode.ZOOM_OUT == -1
    assert CenterPos.DEFAULT == 0
    assert CenterPos.POS_0 == 1
    assert GimbalMode.LOCK == 0
    assert GimbalMode.FOLLOW == 1
    assert GimbalMode.FPV == 2


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-5, 0, 10) == 0
    assert clamp(50, 0, 10) == 10


def test_control_angles_degrees():
    angles = ControlAngles(yaw=-1350, pitch=250, roll=5)
    assert angles.degrees() == (-135.0, 25.0, 0.5)
    assert angles.to_dict() == {"yaw": -1350, "pitch": 250, "roll": 5}
