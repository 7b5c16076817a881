#!/usr/bin/env python3
"""
Biquad cascade: stages run in index order over the same buffer.
"""

import logging
import numpy as np
from typing import Iterator, List, Sequence

from .biquad import Biquad

log = logging.getLogger(__name__)


class FilterCascade:
    """
    Ordered series of :class:`Biquad` stages sharing one buffer.

    Each stage's output is the next stage's input; the buffer is mutated in
    place.
    """

    def __init__(self, stages: Sequence[Biquad]):
        self.stages: List[Biquad] = list(stages)

    @classmethod
    def peak_eq_bank(
        cls,
        count: int,
        fs: float,
        f0: float,
        q: float,
        db_gain: float
    ) -> "FilterCascade":
        """
        Build ``count`` peaking stages with alternating gain ``+g, -g, +g, ...``.
        """
        stages = []
        gain_positive = True
        for _ in range(count):
            gain = db_gain if gain_positive else -db_gain
            gain_positive = not gain_positive
            stages.append(Biquad.peak_eq(fs, f0, q, gain))

        log.debug("Built %d peaking stages at %.1f Hz (Q=%.3f, ±%.2f dB)",
                  count, f0, q, db_gain)
        return cls(stages)

    def __len__(self) -> int:
        return len(self.stages)

    def __iter__(self) -> Iterator[Biquad]:
        return iter(self.stages)

    def __getitem__(self, index: int) -> Biquad:
        return self.stages[index]

    def apply(self, buf: np.ndarray) -> None:
        for bq in self.stages:
            bq.process(buf)

    def apply_scalar(self, buf: np.ndarray) -> None:
        for bq in self.stages:
            bq.process_scalar(buf)

    def reset(self) -> None:
        """Zero every stage's history; coefficients are untouched."""
        for bq in self.stages:
            bq.reset()

    def sos(self) -> np.ndarray:
        """Stage coefficients as an ``(n, 6)`` scipy SOS array."""
        if not self.stages:
            return np.empty((0, 6), dtype=np.float64)
        return np.stack([bq.sos() for bq in self.stages])


def apply_cascade(buf: np.ndarray, cascade: FilterCascade) -> None:
    cascade.apply(buf)


def reset_biquads(cascade: FilterCascade) -> None:
    cascade.reset()
