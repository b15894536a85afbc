from itertools import islice

import numpy as np
import pytest
from chromaramp import Gradient, GradientSlice, Range


def test_inclusive_slice_matches_resampled_full(two_stop):
    v1 = list(islice(two_stop.take(9), 5))
    v2 = list(two_stop.slice(Range.up_to_inclusive(0.5)).take(5))
    assert v1 == v2


def test_simple_slice_colors(red_blue):
    sliced = red_blue[:0.5]
    v1 = list(islice(red_blue.take(9), 5))
    v2 = list(sliced.take(5))
    assert len(v2) == 5
    for c1, c2 in zip(v1, v2):
        assert c1.isclose(c2)


def test_slice_get_clamps_to_its_range(two_stop):
    s = two_stop.slice((0.25, 0.75))
    assert s.get(0.0) == two_stop.get(0.25)
    assert s.get(1.0) == two_stop.get(0.75)
    assert s.get(0.5) == two_stop.get(0.5)
    assert s(0.6) == two_stop(0.6)


def test_slice_domain_falls_back_to_gradient():
    g = Gradient.with_domain([(-1.0, 0.0), (3.0, 8.0)])
    assert g.slice(Range(0.0, 1.0)).domain() == (0.0, 1.0)
    assert g.slice(Range.starting_at(0.5)).domain() == (0.5, 3.0)
    assert g.slice(Range.up_to(0.5)).domain() == (-1.0, 0.5)
    assert g.slice(None).domain() == (-1.0, 3.0)


def test_slice_of_slice_stays_one_level_deep(two_stop):
    s1 = two_stop[0.2:0.8]
    s2 = s1[0.4:]
    s3 = s2[:0.6]
    assert isinstance(s3, GradientSlice)
    assert s3.gradient is two_stop
    assert s3.range == Range(0.4, 0.6)
    assert s3.domain() == (0.4, 0.6)


def test_slice_past_the_end_collapses(two_stop):
    s = two_stop[0.2:0.6][0.7:0.9]
    assert s.domain() == (0.6, 0.6)
    assert list(s.take(3)) == [two_stop.get(0.6)] * 3

    s = two_stop[0.2:0.6][:0.1]
    assert s.domain() == (0.2, 0.2)
    assert s.get(0.9) == two_stop.get(0.2)


def test_slice_does_not_copy_stops(two_stop):
    s = two_stop[0.1:0.3]
    assert s.gradient is two_stop
    assert s.mix_fn is two_stop.mix_fn


def test_unbounded_slice_behaves_like_gradient(red_blue):
    s = red_blue.slice(...)
    for p in np.linspace(-0.5, 1.5, 11):
        assert s.get(p) == red_blue.get(p)


def test_slice_getitem_requires_a_range(two_stop):
    with pytest.raises(TypeError):
        two_stop[0.1:0.3][0.2]
