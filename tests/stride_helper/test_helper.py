import pytest

from stride_helper import clamp, forward_vector, heading_towards, normalize_heading


def test_clamp_within_range():
    assert clamp(0.5, 0.0, 1.0) == 0.5


def test_clamp_bounds():
    assert clamp(-2.0, -1.0, 1.0) == -1.0
    assert clamp(2.0, -1.0, 1.0) == 1.0


def test_clamp_swapped_bounds():
    assert clamp(5.0, 1.0, 0.0) == 1.0


@pytest.mark.parametrize("heading, expected", [
    (0.0, (0.0, 1.0)),
    (90.0, (-1.0, 0.0)),
    (180.0, (0.0, -1.0)),
    (270.0, (1.0, 0.0)),
    (-90.0, (1.0, 0.0)),
])
def test_forward_vector_cardinal_headings(heading, expected):
    x, y = forward_vector(heading)

    assert x == pytest.approx(expected[0], abs=1e-9)
    assert y == pytest.approx(expected[1], abs=1e-9)


def test_forward_vector_is_unit_length():
    x, y = forward_vector(33.3)

    assert x * x + y * y == pytest.approx(1.0)


@pytest.mark.parametrize("heading", [0.0, 45.0, 90.0, 135.0, 200.0, 315.0])
def test_heading_towards_inverts_forward_vector(heading):
    x, y = forward_vector(heading)

    assert heading_towards(x, y) == pytest.approx(heading)


def test_normalize_heading():
    assert normalize_heading(370.0) == pytest.approx(10.0)
    assert normalize_heading(-30.0) == pytest.approx(330.0)
