#!/usr/bin/env python3
"""
Filter cascade construction, ordering and reset.
"""

import numpy as np
import pytest

from dspbench.biquad import Biquad
from dspbench.cascade import FilterCascade, apply_cascade, reset_biquads

FS = 48000.0


def _bank(count=6):
    return FilterCascade.peak_eq_bank(count, FS, 50.0, 0.3, 2.0)


def test_gains_alternate_starting_positive():
    cascade = _bank(5)
    pos = Biquad.peak_eq(FS, 50.0, 0.3, 2.0).sos()
    neg = Biquad.peak_eq(FS, 50.0, 0.3, -2.0).sos()

    assert len(cascade) == 5
    for i, bq in enumerate(cascade):
        expected = pos if i % 2 == 0 else neg
        np.testing.assert_array_equal(bq.sos(), expected)


def test_sos_layout():
    sos = _bank(4).sos()
    assert sos.shape == (4, 6)
    assert np.all(sos[:, 3] == 1.0)
    assert FilterCascade([]).sos().shape == (0, 6)


def test_stages_run_in_order_in_place():
    rng = np.random.default_rng(11)
    x = rng.uniform(-0.5, 0.5, 512)

    cascade = _bank(3)
    buf = x.copy()
    apply_cascade(buf, cascade)

    expected = x.copy()
    for bq in _bank(3):
        bq.process(expected)

    np.testing.assert_allclose(buf, expected, rtol=1e-12, atol=1e-14)


def test_reset_matches_fresh_cascade():
    rng = np.random.default_rng(5)
    cascade = _bank()
    for _ in range(4):
        cascade.apply(rng.uniform(-1, 1, 256))

    x = rng.uniform(-1, 1, 1024)
    reused = x.copy()
    reset_biquads(cascade)
    cascade.apply(reused)

    fresh = x.copy()
    _bank().apply(fresh)

    np.testing.assert_allclose(reused, fresh, rtol=1e-12, atol=1e-14)


def test_reset_keeps_coefficients():
    cascade = _bank()
    before = cascade.sos().copy()
    cascade.apply(np.ones(100))
    cascade.reset()

    np.testing.assert_array_equal(cascade.sos(), before)
    assert all(bq.state == (0.0, 0.0, 0.0, 0.0) for bq in cascade)


@pytest.mark.parametrize("n1", [1, 100, 257])
def test_cascade_continuity(n1):
    x = np.where(np.arange(600) // 480 % 2, 0.5, -0.5).astype(np.float64)

    whole = x.copy()
    _bank().apply(whole)

    cascade = _bank()
    a = x[:n1].copy()
    b = x[n1:].copy()
    cascade.apply(a)
    cascade.apply(b)

    np.testing.assert_allclose(np.concatenate([a, b]), whole, rtol=1e-10, atol=1e-12)


def test_scalar_cascade_matches_vector():
    x = np.where(np.arange(1000) // 480 % 2, 0.5, -0.5).astype(np.float64)
    a = x.copy()
    b = x.copy()
    _bank().apply(a)
    _bank().apply_scalar(b)
    np.testing.assert_allclose(a, b, rtol=1e-10, atol=1e-12)
