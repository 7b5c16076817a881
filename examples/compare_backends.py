#!/usr/bin/env python3
"""
Example: compare the scipy and per-sample backends on a short sweep.
"""

import logging

from dspbench import BenchConfig, Benchmark, verify_cascade_response


def main():
    # Setup logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    # The per-sample path is slow in Python; keep the budget small
    base = BenchConfig(sample_count=16384, filter_count=10, low_exp=3, high_exp=11)

    bench = Benchmark(base)
    response = verify_cascade_response(bench.cascade, base.sample_rate, base.frequency)
    print(f"Cascade: {response['stage_count']} stages, "
          f"center gain {response['center_gain_db']:+.2e} dB")
    print(f"Square wave: {bench.generator.half_period_samples} samples per half period "
          f"({bench.generator.emitted_frequency:.3f} Hz)")
    print()

    vector = bench.run()
    scalar = Benchmark(base.with_overrides(backend="scalar")).run()

    print("Buffer | vector ns | scalar ns | vector RT | scalar RT")
    print("-------|-----------|-----------|-----------|----------")
    for v, s in zip(vector, scalar):
        print(f"{v.buffer_len:6d} | {v.duration_ns:9.2f} | {s.duration_ns:9.2f} | "
              f"{v.realtime:8.1f}x | {s.realtime:8.1f}x")


if __name__ == '__main__':
    main()
