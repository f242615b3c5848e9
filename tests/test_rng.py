import statistics

import pytest

from quantpricer.rng import RNG


def test_same_seed_gives_same_sequence():
    a = RNG(7)
    b = RNG(7)
    assert [a.randn() for _ in range(20)] == [b.randn() for _ in range(20)]
    assert [a.randu() for _ in range(20)] == [b.randu() for _ in range(20)]


def test_different_seeds_differ():
    a = [RNG(1).randn() for _ in range(5)]
    b = [RNG(2).randn() for _ in range(5)]
    assert a != b
    assert len(set(a)) == 5


def test_uniform_in_unit_interval():
    rng = RNG(3)
    draws = [rng.randu() for _ in range(2000)]
    assert all(0.0 <= u < 1.0 for u in draws)
    assert abs(statistics.fmean(draws) - 0.5) < 0.05


def test_normal_moments():
    rng = RNG(11)
    draws = [rng.randn() for _ in range(20000)]
    assert abs(statistics.fmean(draws)) < 0.05
    assert abs(statistics.pstdev(draws) - 1.0) < 0.05


def test_poisson_zero_mean_is_zero():
    rng = RNG(5)
    assert all(rng.poisson(0.0) == 0 for _ in range(50))


def test_poisson_mean():
    rng = RNG(5)
    lam = 4.0
    draws = [rng.poisson(lam) for _ in range(20000)]
    assert all(k >= 0 for k in draws)
    assert abs(statistics.fmean(draws) - lam) < 0.1


def test_gamma_mean_and_positivity():
    rng = RNG(9)
    shape, scale = 3.0, 2.0
    draws = [rng.gamma(shape, scale) for _ in range(20000)]
    assert all(x >= 0.0 for x in draws)
    assert abs(statistics.fmean(draws) - shape * scale) < 0.15


def test_poisson_rejects_negative_mean():
    with pytest.raises(ValueError):
        RNG(1).poisson(-1.0)


def test_gamma_rejects_negative_shape():
    with pytest.raises(ValueError):
        RNG(1).gamma(-0.5, 2.0)