import dataclasses
import math

import pytest

from coords.model import Coordinates


def test_bounds_inclusive():
    assert Coordinates(90, 180).latitude == 90.0
    assert Coordinates(-90, -180).longitude == -180.0


@pytest.mark.parametrize("lat,lon", [(90.000001, 0), (-91, 0), (0, 180.5), (0, -181), (math.nan, 0), (0, math.inf)])
def test_out_of_range_is_rejected_not_clamped(lat, lon):
    with pytest.raises(ValueError):
        Coordinates(lat, lon)


def test_values_normalized_to_float_and_frozen():
    c = Coordinates(3, 101)
    assert isinstance(c.latitude, float)
    assert isinstance(c.longitude, float)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.latitude = 4.0  # type: ignore[misc]


def test_equality_by_value():
    assert Coordinates(3.1578, 101.7117) == Coordinates(3.1578, 101.7117)
    assert len({Coordinates(1, 2), Coordinates(1.0, 2.0)}) == 1
