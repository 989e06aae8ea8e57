"""
2-bit nucleotide codec.

A=0, C=1, G=2, T=3 (case-insensitive). Every other byte is invalid and maps
to None. The complement table gives the code of the complementary base, so
complement_bits(b) == 3 - base_to_bits(b) for valid bases.
"""

from typing import Optional, Tuple, Union

BASE_A = 0
BASE_C = 1
BASE_G = 2
BASE_T = 3

_BASE_CODES = {'A': BASE_A, 'C': BASE_C, 'G': BASE_G, 'T': BASE_T}
_COMPLEMENT_CODES = {'A': BASE_T, 'C': BASE_G, 'G': BASE_C, 'T': BASE_A}


def _build_lut(codes) -> Tuple[Optional[int], ...]:
    """Build a 256-entry byte -> code table, mirroring uppercase to lowercase"""
    lut = [None] * 256
    for base, code in codes.items():
        lut[ord(base)] = code
        lut[ord(base.lower())] = code
    return tuple(lut)


# Indexed directly by the k-mer generator
BASE_LUT = _build_lut(_BASE_CODES)
COMPLEMENT_LUT = _build_lut(_COMPLEMENT_CODES)

CODE_TO_BASE = 'ACGT'


def _byte_value(b: Union[int, str, bytes]) -> int:
    if isinstance(b, int):
        return b
    if len(b) != 1:
        raise ValueError(f"Expected a single base, got {b!r}")
    return b[0] if isinstance(b, (bytes, bytearray)) else ord(b)


def base_to_bits(b: Union[int, str, bytes]) -> Optional[int]:
    """Return the 2-bit code of a base, or None if it is not A/C/G/T"""
    value = _byte_value(b)
    if not 0 <= value < 256:
        return None
    return BASE_LUT[value]


def complement_bits(b: Union[int, str, bytes]) -> Optional[int]:
    """Return the 2-bit code of the complementary base, or None if invalid"""
    value = _byte_value(b)
    if not 0 <= value < 256:
        return None
    return COMPLEMENT_LUT[value]
