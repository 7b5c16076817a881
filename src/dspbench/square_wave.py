#!/usr/bin/env python3
"""
Square Wave Generator
=====================

Symmetric ±0.5 square wave with an integer half period. The half period is
rounded once at construction, so the emitted fundamental is
``sample_rate / (2 * half_period_samples)`` rather than exactly the
requested frequency.
"""

import math
import numpy as np

HIGH = 0.5
LOW = -0.5


def half_period_for(sample_rate: float, frequency: float) -> int:
    """Samples per half cycle, rounded half away from zero."""
    ratio = sample_rate / frequency / 2.0
    return int(math.copysign(math.floor(abs(ratio) + 0.5), ratio))


class SquareWave:
    """
    Streaming square wave generator state.

    Parameters
    ----------
    frequency : float
        Requested fundamental in Hz
    sample_rate : float
        Sample rate in Hz
    """

    def __init__(self, frequency: float, sample_rate: float = 48000.0):
        self.frequency = frequency
        self.sample_rate = sample_rate
        self.half_period_samples = half_period_for(sample_rate, frequency)
        if self.half_period_samples < 1:
            raise ValueError(
                f"Frequency {frequency} Hz too high for sample rate {sample_rate} Hz "
                "(half period rounds to zero samples)"
            )
        self.level = False
        self.samples_since_switch = 0

    @property
    def emitted_frequency(self) -> float:
        return self.sample_rate / (2 * self.half_period_samples)

    def reset(self) -> None:
        self.level = False
        self.samples_since_switch = 0

    def next_sample(self) -> float:
        """Advance by one sample and return it."""
        if self.samples_since_switch == self.half_period_samples:
            self.samples_since_switch = 0
            self.level = not self.level
        self.samples_since_switch += 1
        return HIGH if self.level else LOW


def fill_buffer(buf: np.ndarray, sqw: SquareWave) -> None:
    """
    Overwrite ``buf`` with the next ``len(buf)`` samples of ``sqw``.

    Vectorized: the number of level switches before sample ``i`` is
    ``(counter + i) // half_period``, so every sample and the final state
    follow in closed form.
    """
    n = len(buf)
    if n == 0:
        return

    h = sqw.half_period_samples
    ticks = sqw.samples_since_switch + np.arange(n)
    flips = ticks // h
    odd = (flips & 1).astype(bool)
    high = ~odd if sqw.level else odd
    buf[:] = np.where(high, HIGH, LOW)

    last_tick = sqw.samples_since_switch + n - 1
    total_flips = last_tick // h
    sqw.samples_since_switch = last_tick - total_flips * h + 1
    if total_flips % 2:
        sqw.level = not sqw.level


def fill_buffer_scalar(buf: np.ndarray, sqw: SquareWave) -> None:
    """Per-sample rendition of :func:`fill_buffer`."""
    for i in range(len(buf)):
        buf[i] = sqw.next_sample()
