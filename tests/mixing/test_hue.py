import math

import pytest
from chromaramp import Gradient, Hue
from chromaramp.mixing.hue import normalize_angle, normalize_angle_positive


@pytest.mark.parametrize("degrees, expected", [
    (0.0, 0.0),
    (90.0, 90.0),
    (180.0, 180.0),
    (270.0, -90.0),
    (-90.0, -90.0),
    (-180.0, 180.0),
    (540.0, 180.0),
    (725.0, 5.0),
])
def test_normalize_angle(degrees, expected):
    assert math.isclose(normalize_angle(degrees), expected, abs_tol=1e-9)


@pytest.mark.parametrize("degrees, expected", [
    (0.0, 0.0),
    (-90.0, 270.0),
    (450.0, 90.0),
])
def test_normalize_angle_positive(degrees, expected):
    assert math.isclose(normalize_angle_positive(degrees), expected, abs_tol=1e-9)


def test_hue_equality_is_circular():
    assert Hue(-90.0) == Hue(270.0)
    assert Hue(10.0) == Hue(370.0)
    assert Hue(10.0) != Hue(20.0)
    assert Hue(720.0).to_raw_degrees() == 720.0


def test_hue_does_not_equal_plain_numbers():
    assert Hue(10.0) != 370.0
    assert Hue(10.0) != 10.0
    assert Hue(10.0).isclose(370.0)
    assert hash(Hue(10.0)) == hash(Hue(370.0))
    assert len({Hue(10.0), Hue(370.0), 10.0}) == 2


def test_hue_radians():
    assert math.isclose(Hue.from_radians(math.pi / 2).to_degrees(), 90.0)
    assert math.isclose(Hue(270.0).to_radians(), -math.pi / 2)
    assert math.isclose(Hue(270.0).to_positive_radians(), 3 * math.pi / 2)


def test_hue_arithmetic():
    assert (Hue(350.0) + 20.0).isclose(Hue(10.0))
    assert (Hue(10.0) - Hue(20.0)).isclose(Hue(350.0))
    assert (5.0 + Hue(10.0)).isclose(15.0)


def test_hue_mix_takes_shortest_arc():
    mid = Hue(350.0).mix(Hue(10.0), 0.5)
    assert mid.isclose(Hue(0.0))
    quarter = Hue(10.0).mix(Hue(350.0), 0.25)
    assert quarter.isclose(Hue(5.0))


def test_hue_gradient_wraps_through_zero():
    g = Gradient.from_colors([Hue(300.0), Hue(60.0)])
    assert g.get(0.5).isclose(Hue(0.0))
    hues = [h.to_positive_degrees() for h in g.take(5)]
    for got, want in zip(hues, [300.0, 330.0, 0.0, 30.0, 60.0]):
        assert Hue(got).isclose(Hue(want), abs_tol=1e-6)
