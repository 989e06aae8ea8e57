"""Abundance accumulation per distinct k-mer"""

from typing import Dict, ItemsView, Iterable, ValuesView


class AbundanceCounter:
    """Count table mapping encoded k-mers to their summed abundance.

    Entries are created on first sight and only ever grow.
    """

    def __init__(self):
        self._counts: Dict[int, int] = {}

    def add(self, kmer: int, weight: int):
        """Add weight to kmer's running total"""
        self._counts[kmer] = self._counts.get(kmer, 0) + weight

    def add_all(self, kmers: Iterable[int], weight: int) -> int:
        """Add weight to each k-mer in order; returns how many were added"""
        counts = self._counts
        added = 0
        for kmer in kmers:
            counts[kmer] = counts.get(kmer, 0) + weight
            added += 1
        return added

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, kmer: int) -> bool:
        return kmer in self._counts

    def __getitem__(self, kmer: int) -> int:
        return self._counts.get(kmer, 0)

    def items(self) -> ItemsView[int, int]:
        return self._counts.items()

    def values(self) -> ValuesView[int]:
        return self._counts.values()

    def total_abundance(self) -> int:
        return sum(self._counts.values())
