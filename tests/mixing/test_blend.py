from collections import namedtuple

import numpy as np
import pytest
from chromaramp.mixing import Mixable, blend, clamp_factor
from chromaramp import Gradient


def test_blend_scalars():
    assert blend(2.0, 10.0, 0.25) == 4.0
    assert blend(2, 10, 0.5) == 6.0
    assert blend(np.float32(1.0), np.float32(3.0), 0.5) == 2.0


def test_blend_clamps_factor():
    assert blend(0.0, 10.0, -1.0) == 0.0
    assert blend(0.0, 10.0, 2.0) == 10.0
    assert clamp_factor(0.3) == 0.3


def test_blend_sequences_keep_their_type():
    assert blend((0.0, 1.0), (1.0, 0.0), 0.5) == (0.5, 0.5)
    assert blend([0.0, 4.0], [2.0, 8.0], 0.25) == [0.5, 5.0]

    Point = namedtuple("Point", "x y")
    mixed = blend(Point(0.0, 0.0), Point(2.0, 4.0), 0.5)
    assert mixed == Point(1.0, 2.0)
    assert isinstance(mixed, Point)


def test_blend_arrays():
    a = np.array([0.0, 0.5, 1.0])
    b = np.array([1.0, 0.5, 0.0])
    assert np.allclose(blend(a, b, 0.5), [0.5, 0.5, 0.5])
    with pytest.raises(ValueError):
        blend(a, np.zeros(2), 0.5)


def test_blend_uses_mix_method():
    class Tagged:
        def __init__(self, name):
            self.name = name

        def mix(self, other, factor):
            return Tagged(f"{self.name}->{other.name}@{factor}")

    assert isinstance(Tagged("a"), Mixable)
    assert blend(Tagged("a"), Tagged("b"), 3.0).name == "a->b@1.0"


def test_blend_rejects_unknown_types():
    with pytest.raises(TypeError):
        blend("red", "blue", 0.5)
    with pytest.raises(ValueError):
        blend((0.0, 1.0), (1.0,), 0.5)


def test_gradient_over_arrays():
    g = Gradient.from_colors([np.zeros(3), np.ones(3)])
    assert np.allclose(g.get(0.25), [0.25, 0.25, 0.25])
    assert np.allclose(list(g.take(3))[1], [0.5, 0.5, 0.5])
