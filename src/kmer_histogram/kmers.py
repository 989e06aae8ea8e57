"""
K-mer generation over 2-bit encoded windows.

Each window of k bases is packed most-significant base first into an
unsigned integer of 2*k bits. With canonical=True the emitted value is the
numerically smaller of the forward encoding and the encoding of the literal
reverse-complement string.
"""

import logging
import operator
from typing import Iterator, Optional, Union

from .exceptions import KmerSizeError
from .nucleotides import BASE_LUT, CODE_TO_BASE, COMPLEMENT_LUT

logger = logging.getLogger(__name__)

MIN_K = 1
MAX_K = 32  # 2 bits per base in a 64-bit word

Sequence = Union[bytes, bytearray, memoryview, str]


def validate_k(k) -> int:
    """Check that k fits a single 64-bit encoding; return it as an int"""
    if isinstance(k, bool):
        raise KmerSizeError(f"K-mer size must be an integer, got {k!r}")
    try:
        k = operator.index(k)
    except TypeError:
        raise KmerSizeError(f"K-mer size must be an integer, got {k!r}") from None
    if not MIN_K <= k <= MAX_K:
        raise KmerSizeError(f"K-mer size must be between {MIN_K} and {MAX_K}, got {k}")
    return k


def _as_bytes(seq: Sequence) -> bytes:
    if isinstance(seq, str):
        # Non-ASCII characters become '?' and invalidate their windows
        return seq.encode('ascii', errors='replace')
    return bytes(seq)


def iter_kmers(seq: Sequence, k: int, canonical: bool = False) -> Iterator[int]:
    """Yield the encoded k-mer of every all-ACGT window of seq, left to right.

    Windows containing any other symbol are dropped. The forward and
    reverse-complement registers are rolled one base at a time, and a window
    is emitted once k consecutive valid bases have been seen.
    """
    data = _as_bytes(seq)
    if len(data) < k:
        return

    mask = (1 << (2 * k)) - 1
    rc_shift = 2 * (k - 1)
    forward = 0
    reverse = 0
    run = 0  # valid bases since the last invalid one

    for b in data:
        code = BASE_LUT[b]
        if code is None:
            run = 0
            forward = 0
            reverse = 0
            continue

        forward = ((forward << 2) | code) & mask
        # The newest base's complement becomes the most significant base
        reverse = (reverse >> 2) | (COMPLEMENT_LUT[b] << rc_shift)
        run += 1

        if run >= k:
            if canonical and reverse < forward:
                yield reverse
            else:
                yield forward


def encode_kmer(kmer: Sequence) -> Optional[int]:
    """Encode a single k-mer (up to 32 bases); None if any base is invalid"""
    data = _as_bytes(kmer)
    if not MIN_K <= len(data) <= MAX_K:
        return None

    encoded = 0
    for b in data:
        code = BASE_LUT[b]
        if code is None:
            return None
        encoded = (encoded << 2) | code
    return encoded


def reverse_complement_encoding(kmer: Sequence) -> Optional[int]:
    """Encode the reverse complement of a k-mer, last base first"""
    data = _as_bytes(kmer)
    if not MIN_K <= len(data) <= MAX_K:
        return None

    encoded = 0
    for b in reversed(data):
        code = COMPLEMENT_LUT[b]
        if code is None:
            return None
        encoded = (encoded << 2) | code
    return encoded


def canonical_kmer(kmer: Sequence) -> Optional[int]:
    """min(forward, reverse complement) as plain integers"""
    forward = encode_kmer(kmer)
    if forward is None:
        return None
    return min(forward, reverse_complement_encoding(kmer))


def decode_kmer(value: int, k: int) -> str:
    """Decode a 2*k bit integer back into its base string"""
    bases = []
    for i in range(k):
        code = (value >> (2 * (k - 1 - i))) & 3
        bases.append(CODE_TO_BASE[code])
    return ''.join(bases)
