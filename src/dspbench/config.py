#!/usr/bin/env python3
"""
Benchmark configuration.
"""

from dataclasses import dataclass, asdict, replace
from typing import Any, Dict

BACKENDS = ("vector", "scalar")


@dataclass(frozen=True)
class BenchConfig:
    """Fixed parameters of one benchmark run."""
    sample_rate: float = 48000.0
    sample_count: int = 524288  # samples processed per trial
    filter_count: int = 100
    low_exp: int = 3  # first buffer length is 2**low_exp
    high_exp: int = 13  # exclusive
    frequency: float = 50.0
    q: float = 0.3
    db_gain: float = 2.0
    backend: str = "vector"

    def __post_init__(self):
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        if self.sample_count <= 0:
            raise ValueError(f"sample_count must be positive, got {self.sample_count}")
        if self.filter_count <= 0:
            raise ValueError(f"filter_count must be positive, got {self.filter_count}")
        if self.low_exp < 0 or self.high_exp <= self.low_exp:
            raise ValueError(
                f"Buffer exponent range [{self.low_exp}, {self.high_exp}) is empty or negative"
            )
        if self.frequency <= 0:
            raise ValueError(f"frequency must be positive, got {self.frequency}")
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend {self.backend!r}; choose from {BACKENDS}")

    @property
    def exponents(self) -> range:
        return range(self.low_exp, self.high_exp)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "BenchConfig":
        return cls(**d)

    def with_overrides(self, **changes: Any) -> "BenchConfig":
        """Copy with the non-None entries of ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
