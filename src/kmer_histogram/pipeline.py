"""
Driver for the k-mer histogram pipeline.

Records are consumed one at a time: the header is checked for an abundance
tag first, and only tagged records have their k-mers generated and added to
the count table. The histogram is built once, after the last record.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .config import HistogramConfig
from .counter import AbundanceCounter
from .headers import build_header, extract_abundance
from .histogram import Histogram, build_histogram
from .kmers import iter_kmers

logger = logging.getLogger(__name__)


@dataclass
class RunStats:
    """Per-run bookkeeping"""
    records_seen: int = 0
    records_skipped: int = 0  # no usable abundance tag
    kmers_added: int = 0
    windows_dropped: int = 0  # windows with a non-ACGT base


class KmerHistogramBuilder:
    """Owns the count table for one run"""

    def __init__(self, config: HistogramConfig):
        self.config = config
        self.counter = AbundanceCounter()
        self.stats = RunStats()

    def process_record(self, record) -> bool:
        """Accumulate one record's k-mers; False if it had no abundance"""
        self.stats.records_seen += 1
        header = build_header(record.id, getattr(record, 'description', None))
        abundance = extract_abundance(header)
        if abundance is None:
            self.stats.records_skipped += 1
            logger.debug(f"No abundance tag in record {record.id}, skipping")
            return False

        k = self.config.k
        added = self.counter.add_all(
            iter_kmers(record.seq, k, self.config.canonical), abundance)
        self.stats.kmers_added += added
        self.stats.windows_dropped += max(len(record.seq) - k + 1, 0) - added
        return True

    def consume(self, records: Iterable) -> RunStats:
        for record in records:
            self.process_record(record)

        logger.info(f"Processed {self.stats.records_seen} records "
                    f"({self.stats.records_skipped} without abundance), "
                    f"{len(self.counter)} distinct {self.config.k}-mers")
        if self.stats.windows_dropped:
            logger.info(f"Dropped {self.stats.windows_dropped} windows containing non-ACGT bases")
        return self.stats

    def histogram(self) -> Histogram:
        return build_histogram(self.counter)


def run(records: Iterable, k: int, canonical: bool = False,
        limit: Optional[int] = None) -> List[Tuple[int, int]]:
    """Build the histogram for records and return the rows to print"""
    # Validates k before the first record is requested
    config = HistogramConfig(k=k, canonical=canonical, limit=limit)
    builder = KmerHistogramBuilder(config)
    builder.consume(records)
    return list(builder.histogram().rows(config.limit))
