"""
dspbench - buffer-size throughput benchmark for a biquad cascade.
"""

from .biquad import Biquad, design_peaking_eq, iir
from .square_wave import SquareWave, fill_buffer, fill_buffer_scalar
from .cascade import FilterCascade, apply_cascade, reset_biquads
from .config import BenchConfig
from .bench import Benchmark, TrialResult, print_result
from .sinks import BufferSink, NullSink, PcmFileSink
from .verification import verify_cascade_response

__version__ = "0.1.0"
__all__ = [
    "Biquad",
    "design_peaking_eq",
    "iir",
    "SquareWave",
    "fill_buffer",
    "fill_buffer_scalar",
    "FilterCascade",
    "apply_cascade",
    "reset_biquads",
    "BenchConfig",
    "Benchmark",
    "TrialResult",
    "print_result",
    "BufferSink",
    "NullSink",
    "PcmFileSink",
    "verify_cascade_response",
]
