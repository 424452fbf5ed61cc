import numpy as np
import pytest

from vecindex.distances import (
    inner_product,
    inner_products_ny,
    l1,
    l2sqr,
    l2sqr_ny,
    linf,
    madd,
    madd_and_argmin,
    norm_l2sqr,
)


@pytest.fixture
def vectors():
    rng = np.random.default_rng(7)
    return rng.standard_normal(17).astype(np.float32), rng.standard_normal(17).astype(np.float32)


def test_l2sqr_pinned():
    assert l2sqr([0.0, 0.0], [3.0, 4.0]) == 25.0


def test_linf_pinned():
    assert linf([0.0, 0.0], [3.0, -4.0]) == 4.0


def test_identical_vectors_have_zero_distance(vectors):
    x, _ = vectors
    assert l2sqr(x, x) == 0.0
    assert l1(x, x) == 0.0
    assert linf(x, x) == 0.0


def test_distances_are_symmetric(vectors):
    x, y = vectors
    assert l2sqr(x, y) == pytest.approx(l2sqr(y, x))
    assert l1(x, y) == pytest.approx(l1(y, x))
    assert linf(x, y) == linf(y, x)
    assert inner_product(x, y) == pytest.approx(inner_product(y, x))


def test_norm_relations(vectors):
    x, y = vectors
    zero = np.zeros_like(x)
    assert norm_l2sqr(x) == pytest.approx(inner_product(x, x), rel=1e-5)
    assert l2sqr(x, zero) == pytest.approx(norm_l2sqr(x), rel=1e-5)
    diff = x - y
    assert l2sqr(x, y) == pytest.approx(inner_product(diff, diff), rel=1e-5)


def test_norm_ordering(vectors):
    x, y = vectors
    assert linf(x, y) <= l1(x, y)
    assert l2sqr(x, y) <= l1(x, y) * linf(x, y) * (1 + 1e-5)


def test_empty_vectors():
    assert l2sqr([], []) == 0.0
    assert inner_product([], []) == 0.0
    assert linf([], []) == 0.0
    assert norm_l2sqr([]) == 0.0


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        l2sqr([1.0, 2.0], [1.0])
    with pytest.raises(ValueError):
        madd([1.0], 1.0, [1.0, 2.0])


def test_batched_match_single(vectors):
    x, _ = vectors
    ys = np.random.default_rng(3).standard_normal((5, x.size)).astype(np.float32)
    dists = l2sqr_ny(x, ys)
    ips = inner_products_ny(x, ys)
    assert len(dists) == 5 and len(ips) == 5
    for row, d, ip in zip(ys, dists, ips):
        assert d == pytest.approx(l2sqr(x, row), rel=1e-5)
        assert ip == pytest.approx(inner_product(x, row), rel=1e-5, abs=1e-5)


def test_batched_shape_error():
    with pytest.raises(ValueError):
        l2sqr_ny([1.0, 2.0], [[1.0, 2.0, 3.0]])


def test_madd_with_zero_factor_returns_a(vectors):
    a, b = vectors
    assert np.array_equal(madd(a, 0.0, b), a)


def test_madd_and_argmin_matches_result(vectors):
    a, b = vectors
    c, index = madd_and_argmin(a, 2.0, b)
    assert np.allclose(c, madd(a, 2.0, b))
    assert index == int(np.argmin(c))


def test_madd_and_argmin_none_below_start():
    c, index = madd_and_argmin([1e21, 2e21], 0.0, [0.0, 0.0])
    assert index == -1
    assert len(c) == 2


def test_madd_and_argmin_picks_first_minimum():
    _, index = madd_and_argmin([3.0, 1.0, 1.0], 1.0, [0.0, 0.0, 0.0])
    assert index == 1