"""
Frequency-of-frequencies histogram over accumulated k-mer abundances.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, TextIO, Tuple

import numpy as np

from .counter import AbundanceCounter

logger = logging.getLogger(__name__)

HISTOGRAM_HEADER = "K-mer Frequency\tCount"

Row = Tuple[int, int]


@dataclass(frozen=True)
class Histogram:
    """Distinct abundance values and how many k-mers reached each one.

    `frequencies` is sorted ascending and unique; `counts` is aligned with it.
    """
    frequencies: np.ndarray  # uint64
    counts: np.ndarray       # int64

    def __len__(self) -> int:
        return len(self.frequencies)

    def rows(self, limit: Optional[int] = None) -> Iterator[Row]:
        """Yield (frequency, count) ascending, stopping past limit"""
        for freq, count in zip(self.frequencies.tolist(), self.counts.tolist()):
            if limit is not None and freq > limit:
                break
            yield freq, count

    def as_dict(self):
        return dict(self.rows())

    def total_kmers(self) -> int:
        """Number of distinct k-mers behind the histogram"""
        return int(self.counts.sum())

    def total_abundance(self) -> int:
        """Sum of frequency * count; equals the count table's total"""
        return sum(f * c for f, c in self.rows())


def build_histogram(counts: AbundanceCounter) -> Histogram:
    """Invert a final count table into a sorted histogram"""
    values = np.fromiter(counts.values(), dtype=np.uint64, count=len(counts))
    # np.unique returns the distinct values already sorted
    frequencies, occurrences = np.unique(values, return_counts=True)
    logger.debug(f"Histogram has {len(frequencies)} distinct frequencies "
                 f"over {len(values)} k-mers")
    return Histogram(frequencies=frequencies, counts=occurrences.astype(np.int64))


def write_histogram(rows: Iterable[Row], handle: TextIO) -> int:
    """Write the header and one TSV line per row; returns the row count"""
    handle.write(HISTOGRAM_HEADER + "\n")
    written = 0
    for freq, count in rows:
        handle.write(f"{freq}\t{count}\n")
        written += 1
    return written
