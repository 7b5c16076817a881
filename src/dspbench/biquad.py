#!/usr/bin/env python3
"""
Peaking-EQ Biquad
=================

Direct-form-I second-order IIR section with RBJ cookbook peaking-EQ
coefficients. History (``x1, x2, y1, y2``) persists across calls so a
stream can be fed in buffers of any length.

Two processing paths share the same state:
- ``process``: vectorized through ``scipy.signal.lfilter``, seeded from the
  direct-form-I history with ``lfiltic``
- ``process_scalar``: the recurrence evaluated one sample at a time
"""

import math
import numpy as np
from scipy.signal import lfilter, lfiltic
from typing import Tuple


class Biquad:
    """
    Second-order IIR filter with fixed coefficients and streaming state.

    Coefficients are normalized so that ``a0 == 1``.
    """

    __slots__ = ("b0", "b1", "b2", "a1", "a2", "x1", "x2", "y1", "y2")

    def __init__(self, b0: float, b1: float, b2: float, a1: float, a2: float):
        self.b0 = float(b0)
        self.b1 = float(b1)
        self.b2 = float(b2)
        self.a1 = float(a1)
        self.a2 = float(a2)

        self.x1 = 0.0
        self.x2 = 0.0
        self.y1 = 0.0
        self.y2 = 0.0

    @classmethod
    def peak_eq(cls, fs: float, f0: float, q: float, db_gain: float) -> "Biquad":
        """
        Design a peaking equalizer section.

        Parameters
        ----------
        fs : float
            Sample rate in Hz
        f0 : float
            Center frequency in Hz
        q : float
            Quality factor
        db_gain : float
            Gain at ``f0`` in dB (negative cuts)

        Returns
        -------
        Biquad
            New filter with zeroed state
        """
        A = 10.0 ** (db_gain / 40.0)
        omega = 2 * math.pi * f0 / fs
        alpha = math.sin(omega) / (2 * q)

        a0 = 1 + alpha / A

        b0 = (1 + alpha * A) / a0
        b1 = (-2 * math.cos(omega)) / a0
        b2 = (1 - alpha * A) / a0
        # Peaking EQ shares the first-order term between numerator and denominator
        a1 = b1
        a2 = (1 - alpha / A) / a0

        return cls(b0, b1, b2, a1, a2)

    @property
    def b(self) -> np.ndarray:
        return np.array([self.b0, self.b1, self.b2], dtype=np.float64)

    @property
    def a(self) -> np.ndarray:
        return np.array([1.0, self.a1, self.a2], dtype=np.float64)

    def sos(self) -> np.ndarray:
        """Coefficients as one scipy second-order-section row."""
        return np.array([self.b0, self.b1, self.b2, 1.0, self.a1, self.a2],
                        dtype=np.float64)

    @property
    def state(self) -> Tuple[float, float, float, float]:
        return self.x1, self.x2, self.y1, self.y2

    def reset(self) -> None:
        self.x1 = 0.0
        self.x2 = 0.0
        self.y1 = 0.0
        self.y2 = 0.0

    def tick(self, x: float) -> float:
        """Filter one sample and advance the history."""
        y = (self.b0 * x) + (self.b1 * self.x1) + (self.b2 * self.x2) \
            - (self.a1 * self.y1) - (self.a2 * self.y2)

        self.x2 = self.x1
        self.x1 = x

        self.y2 = self.y1
        self.y1 = y
        return y

    def process(self, buf: np.ndarray) -> None:
        """Filter ``buf`` in place, continuing from the current history."""
        n = len(buf)
        if n == 0:
            return

        b = self.b
        a = self.a
        zi = lfiltic(b, a, [self.y1, self.y2], [self.x1, self.x2])
        y, _ = lfilter(b, a, buf, zi=zi)

        if n >= 2:
            self.x1, self.x2 = float(buf[-1]), float(buf[-2])
            self.y1, self.y2 = float(y[-1]), float(y[-2])
        else:
            self.x2, self.x1 = self.x1, float(buf[0])
            self.y2, self.y1 = self.y1, float(y[0])

        buf[:] = y

    def process_scalar(self, buf: np.ndarray) -> None:
        """Per-sample rendition of :meth:`process`."""
        tick = self.tick
        for i in range(len(buf)):
            buf[i] = tick(float(buf[i]))

    def __repr__(self) -> str:
        return (f"Biquad(b0={self.b0!r}, b1={self.b1!r}, b2={self.b2!r}, "
                f"a1={self.a1!r}, a2={self.a2!r})")


def design_peaking_eq(sample_rate: float, center_freq: float, q: float,
                      gain_db: float) -> Biquad:
    return Biquad.peak_eq(sample_rate, center_freq, q, gain_db)


def iir(buf: np.ndarray, bq: Biquad) -> None:
    """Apply ``bq`` to ``buf`` in place."""
    bq.process(buf)
