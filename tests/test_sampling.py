"""Tests for the fixed-step curve sampler."""

import pytest

from poly_drawer.sampling import evaluate_polynomial, sample_curve


def test_sample_curve_integer_range_inclusive() -> None:
    """-10..10 step 1 gives 21 samples on both boundaries."""
    coeffs = (1.0 / 3.0, -1.5, 19.0 / 6.0, 0.0)

    samples = sample_curve(coeffs, -10.0, 10.0, 1.0)

    assert len(samples) == 21
    assert samples[0][0] == -10.0
    assert samples[-1][0] == 10.0
    for x, y in samples:
        assert y == pytest.approx(evaluate_polynomial(coeffs, x), abs=1e-9)


def test_sample_curve_accumulates_step() -> None:
    """A 0.1 step drifts below 1.0 but the last sample is still kept."""
    samples = sample_curve((1.0, 0.0), 0.0, 1.0, 0.1)

    assert len(samples) == 11
    assert samples[-1][0] == pytest.approx(1.0)
    assert samples[-1][0] <= 1.0


def test_sample_curve_is_recomputed_each_call() -> None:
    coeffs = (2.0, 0.0, -1.0)

    assert sample_curve(coeffs, -1.0, 1.0, 0.5) == sample_curve(coeffs, -1.0, 1.0, 0.5)


def test_sample_curve_single_point_range() -> None:
    assert sample_curve((1.0, 1.0), 2.0, 2.0, 1.0) == [(2.0, 3.0)]


def test_sample_curve_empty_when_start_after_end() -> None:
    assert sample_curve((1.0,), 1.0, 0.0, 1.0) == []


@pytest.mark.parametrize("step", [0.0, -1.0])
def test_sample_curve_rejects_non_positive_step(step) -> None:
    with pytest.raises(ValueError):
        sample_curve((1.0,), 0.0, 1.0, step)


def test_sample_curve_rejects_step_below_float_spacing() -> None:
    """At 1e16 a unit step no longer moves x; sampling must stop, not spin."""
    with pytest.raises(ValueError, match="float spacing"):
        sample_curve((1.0,), 1e16, 1e16 + 10, 1.0)


def test_sample_curve_large_but_representable_step() -> None:
    samples = sample_curve((1.0, 0.0), 1e16, 1e16 + 8.0, 4.0)

    assert [x for x, _ in samples] == [1e16, 1e16 + 4.0, 1e16 + 8.0]
