from datetime import datetime

import pytest

from floodconsequences.crops.damagefunction import DamageFunction
from floodconsequences.events import ArrivalandDurationEvent


@pytest.fixture
def damage_function():
    return DamageFunction(
        duration_damage_curves={
            1.0: [1.1, 2.1, 3.1, 4.1, 5.1, 6.1, 7.1, 8.1, 9.1, 10.1, 11.1, 12.1],
            2.0: [1.2, 2.2, 3.2, 4.2, 5.2, 6.2, 7.2, 8.2, 9.2, 10.2, 11.2, 12.2],
            3.0: [1.3, 2.3, 3.3, 4.3, 5.3, 6.3, 7.3, 8.3, 9.3, 10.3, 11.3, 12.3],
            4.0: [1.4, 2.4, 3.4, 4.4, 5.4, 6.4, 7.4, 8.4, 9.4, 10.4, 11.4, 12.4],
        }
    )


def _event(arrival, duration):
    return ArrivalandDurationEvent(arrival_time=arrival, duration=duration)


def test_between_curves(damage_function):
    got = damage_function.compute_damage_percent(_event(datetime(1984, 1, 22), 1.5))
    assert got == 1.15


def test_below_first_curve(damage_function):
    got = damage_function.compute_damage_percent(_event(datetime(1984, 1, 22), 0.5))
    assert got == 0.55


def test_between_curves_in_february(damage_function):
    got = damage_function.compute_damage_percent(_event(datetime(1984, 2, 22), 2.5))
    assert got == 2.25


def test_beyond_last_curve_uses_last_curve(damage_function):
    got = damage_function.compute_damage_percent(_event(datetime(1984, 3, 22), 10.0))
    assert got == 3.4


def test_no_curves_gives_zero():
    got = DamageFunction().compute_damage_percent(_event(datetime(1984, 3, 22), 5.0))
    assert got == 0.0