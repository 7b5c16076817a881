#!/usr/bin/env python3
"""
Buffer-Size Sweep Benchmark
===========================

For every buffer length ``2**l`` in the configured exponent range, stream
the same total number of samples through square wave generation and the
peaking-EQ cascade, and report:

- per-sample-per-filter cost in ns: ``elapsed_ns / filter_count / sample_count``
- real-time multiple: ``1e9 / (cost_ns * sample_rate)``

Generator and cascade are built once; their state is reset at the start of
each trial and never within one, so every trial measures a continuous
stream.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

import numpy as np

from .cascade import FilterCascade
from .config import BenchConfig
from .sinks import BufferSink, NullSink
from .square_wave import SquareWave, fill_buffer, fill_buffer_scalar

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrialResult:
    """Timing of one buffer-size trial."""
    buffer_len: int
    buffer_count: int
    label: str
    elapsed_ns: int
    duration_ns: float  # per sample, per filter
    realtime: float

    def format(self) -> str:
        return (f"\t{self.label}\t{self.duration_ns:g} ns"
                f"\t{self.realtime:g}x for generator + IIR filter")


def normalize_elapsed(elapsed_ns: int, filter_count: int, sample_count: int,
                      sample_rate: float):
    """Return ``(ns per sample per filter, real-time multiple)``."""
    duration = elapsed_ns / float(filter_count) / sample_count
    realtime = 1e9 / (duration * sample_rate) if duration > 0 else float("inf")
    return duration, realtime


class Benchmark:
    """
    Owns the generator, the cascade and the working buffer for one run.

    Parameters
    ----------
    config : BenchConfig
        Run parameters
    sink : BufferSink, optional
        Receives every processed buffer; defaults to :class:`NullSink`
    clock : callable, optional
        Monotonic nanosecond clock, ``time.perf_counter_ns`` by default
    """

    def __init__(
        self,
        config: Optional[BenchConfig] = None,
        sink: Optional[BufferSink] = None,
        clock: Callable[[], int] = time.perf_counter_ns
    ):
        self.config = config or BenchConfig()
        self.sink = sink if sink is not None else NullSink()
        self.clock = clock

        cfg = self.config
        self.generator = SquareWave(cfg.frequency, cfg.sample_rate)
        self.cascade = FilterCascade.peak_eq_bank(
            cfg.filter_count, cfg.sample_rate, cfg.frequency, cfg.q, cfg.db_gain
        )

        if cfg.backend == "scalar":
            self._fill = fill_buffer_scalar
            self._filter = self.cascade.apply_scalar
        else:
            self._fill = fill_buffer
            self._filter = self.cascade.apply

        self.log = log

    def reset(self) -> None:
        self.generator.reset()
        self.cascade.reset()

    def run_trial(self, exponent: int) -> TrialResult:
        """Stream ``sample_count`` samples in buffers of ``2**exponent``."""
        cfg = self.config
        buffer_len = 2 ** exponent
        buffer_count = cfg.sample_count // buffer_len

        buf = np.zeros(buffer_len, dtype=np.float64)
        self.reset()
        self.sink.open(buffer_len)

        fill = self._fill
        apply_filters = self._filter
        write = self.sink.write
        gen = self.generator

        start = self.clock()
        for _ in range(buffer_count):
            fill(buf, gen)
            apply_filters(buf)
            write(buf)
        elapsed = self.clock() - start

        self.sink.close()

        duration, realtime = normalize_elapsed(
            elapsed, cfg.filter_count, cfg.sample_count, cfg.sample_rate
        )
        self.log.debug("Trial %d: %d buffers of %d samples in %d ns",
                       exponent, buffer_count, buffer_len, elapsed)

        return TrialResult(
            buffer_len=buffer_len,
            buffer_count=buffer_count,
            label=cfg.backend,
            elapsed_ns=elapsed,
            duration_ns=duration,
            realtime=realtime,
        )

    def trials(self) -> Iterator[TrialResult]:
        for exponent in self.config.exponents:
            yield self.run_trial(exponent)

    def run(self, report: Optional[Callable[[TrialResult], None]] = None) -> List[TrialResult]:
        """Run the whole sweep, passing each result to ``report`` as it lands."""
        cfg = self.config
        self.log.info("Sweeping buffer lengths 2^%d..2^%d: %d samples, %d filters, %s backend",
                      cfg.low_exp, cfg.high_exp - 1, cfg.sample_count,
                      cfg.filter_count, cfg.backend)

        results = []
        for result in self.trials():
            if report is not None:
                report(result)
            results.append(result)
        return results


def print_result(result: TrialResult) -> None:
    print(f"Buffer size: {result.buffer_len} samples")
    print(result.format())
