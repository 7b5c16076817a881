#!/usr/bin/env python3
"""
DSP buffer-size benchmark.

Run with no arguments for the standard sweep (48 kHz, 524288 samples per
trial, 100 peaking-EQ stages, buffers of 8 to 4096 samples):

    dspbench

Smaller sweep through the per-sample Python path:

    dspbench --backend scalar --sample-count 8192 --filter-count 4

Dump every trial as raw float64 PCM for offline inspection:

    dspbench --write-buffers /tmp
"""

import argparse
import datetime
import logging
import sys
from typing import List, Optional

from .bench import Benchmark, print_result
from .config import BACKENDS, BenchConfig
from .sinks import NullSink, PcmFileSink
from .verification import verify_cascade_response


def build_parser() -> argparse.ArgumentParser:
    defaults = BenchConfig()
    p = argparse.ArgumentParser(
        prog="dspbench",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description="Time square wave generation plus a biquad cascade "
                    "across power-of-two buffer sizes.",
    )

    # ─── Signal ───
    g = p.add_argument_group("Signal")
    g.add_argument("--sample-rate", type=float, default=defaults.sample_rate,
                   help="Sample rate (Hz) used for design and real-time figures.")
    g.add_argument("--frequency", type=float, default=defaults.frequency,
                   help="Square wave fundamental and filter center frequency (Hz).")

    # ─── Filters ───
    g = p.add_argument_group("Filters")
    g.add_argument("--filter-count", type=int, default=defaults.filter_count,
                   help="Number of cascaded peaking-EQ stages.")
    g.add_argument("--q", type=float, default=defaults.q,
                   help="Quality factor of every stage.")
    g.add_argument("--gain", type=float, default=defaults.db_gain,
                   help="Stage gain magnitude (dB); stages alternate +gain, -gain.")

    # ─── Sweep ───
    g = p.add_argument_group("Sweep")
    g.add_argument("--sample-count", type=int, default=defaults.sample_count,
                   help="Samples streamed per trial, whatever the buffer size.")
    g.add_argument("--low-exp", type=int, default=defaults.low_exp,
                   help="Smallest buffer is 2^low-exp samples.")
    g.add_argument("--high-exp", type=int, default=defaults.high_exp,
                   help="Largest buffer is 2^(high-exp - 1) samples.")
    g.add_argument("--backend", choices=BACKENDS, default=defaults.backend,
                   help="'vector' filters whole buffers with scipy; "
                        "'scalar' runs the recurrence one sample at a time.")

    # ─── Output/Analysis ───
    g = p.add_argument_group("Output/Analysis")
    g.add_argument("--write-buffers", metavar="DIR",
                   help="Write each trial's output as raw little-endian float64 "
                        "PCM to DIR/vec_overhead_py_<buffer_len>.")
    g.add_argument("--verify", action="store_true",
                   help="Report the cascade's frequency response before the sweep.")
    g.add_argument("--plot", action="store_true",
                   help="Plot the cascade's magnitude and phase response (matplotlib).")

    # ─── Misc ───
    g = p.add_argument_group("Misc")
    g.add_argument("--debug", action="store_true",
                   help="Enable DEBUG-level logging for extra detail.")
    g.add_argument("--log-file", type=str,
                   help="Also write log output to this file ('auto' for a timestamped name).")
    return p


def setup_logging(debug: bool, log_file: Optional[str]) -> logging.Logger:
    log_handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_format = "%(asctime)s - %(levelname)s - %(message)s"
        if log_file == 'auto':
            timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = f"dspbench_{timestamp}.log"
        log_handlers.append(logging.FileHandler(log_file, mode='w'))
    else:
        log_format = "%(levelname)s %(message)s"

    logging.basicConfig(
        handlers=log_handlers,
        level=logging.DEBUG if debug else logging.INFO,
        format=log_format,
        force=True
    )
    log = logging.getLogger("dspbench")
    if log_file:
        log.info("Logging to file: %s", log_file)
    return log


def print_verification(results: dict) -> None:
    print("Cascade response")
    print(f"\tstages      : {results['stage_count']}")
    print(f"\tDC gain     : {results['dc_gain_db']:.6f} dB")
    print(f"\tcenter gain : {results['center_gain_db']:.6f} dB")
    print(f"\tNyquist gain: {results['nyquist_gain_db']:.6f} dB")
    print(f"\tpeak        : {results['peak_gain_db']:.6f} dB "
          f"at {results['peak_freq']:.1f} Hz")


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    a = p.parse_args(argv)
    log = setup_logging(a.debug, a.log_file)

    try:
        config = BenchConfig(
            sample_rate=a.sample_rate,
            sample_count=a.sample_count,
            filter_count=a.filter_count,
            low_exp=a.low_exp,
            high_exp=a.high_exp,
            frequency=a.frequency,
            q=a.q,
            db_gain=a.gain,
            backend=a.backend,
        )
    except ValueError as e:
        p.error(str(e))

    sink = PcmFileSink(a.write_buffers) if a.write_buffers else NullSink()
    bench = Benchmark(config, sink=sink)
    log.debug("Configuration: %s", config.to_dict())
    log.debug("Square wave half period: %d samples (%.4f Hz emitted)",
              bench.generator.half_period_samples, bench.generator.emitted_frequency)

    if a.verify or a.plot:
        results = verify_cascade_response(
            bench.cascade, config.sample_rate, config.frequency, plot=a.plot
        )
        print_verification(results)

    print("DSP Bench Python")
    bench.run(report=print_result)
    return 0


def run() -> None:
    """Console entry point: log fatal errors and exit non-zero."""
    try:
        sys.exit(main())
    except Exception as e:
        logging.error("Fatal: %s", e)
        logging.debug("Traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
