import pytest

from pzmap.mathutils import Vector2i, fast_clamp, fast_max, fast_min


@pytest.mark.parametrize("a, b", [(3, 5), (5, 3), (-2, -7), (4, 4)])
def test_min_and_max(a, b):
    low = fast_min(a, b)
    high = fast_max(a, b)
    assert {low, high} == {a, b}
    assert low <= high


def test_min_max_pick_expected_values():
    assert fast_min(3, 5) == 3
    assert fast_max(3, 5) == 5


def test_clamp_below_and_above():
    assert fast_clamp(0.01, 0.05, 50.0) == 0.05
    assert fast_clamp(80.0, 0.05, 50.0) == 50.0


def test_clamp_inside_range_is_unchanged():
    assert fast_clamp(10.0, 0.05, 50.0) == 10.0


def test_vector_defaults_and_equality():
    assert Vector2i() == Vector2i(0, 0)
    assert Vector2i(27, 38) == Vector2i(x=27, y=38)
    assert Vector2i(1, 2) != Vector2i(2, 1)