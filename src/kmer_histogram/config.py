"""Run configuration"""

from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError
from .kmers import validate_k


@dataclass
class HistogramConfig:
    """Parameters for one histogram run"""
    k: int
    canonical: bool = False
    limit: Optional[int] = None  # highest frequency to report

    def __post_init__(self):
        self.k = validate_k(self.k)
        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int):
                raise ConfigurationError(f"limit must be an integer, got {self.limit!r}")
            if self.limit < 0:
                raise ConfigurationError(f"limit must be non-negative, got {self.limit}")
