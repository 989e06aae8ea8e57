"""
Abundance annotation in FASTA headers.

Headers follow `[accession]_[counter] ka:f:[abundance]`. Only the first
`ka:f:` tag is considered.
"""

import re
from typing import Optional

ABUNDANCE_PATTERN = re.compile(r'ka:f:(\d+)')

# Abundances are unsigned 32-bit; wider values are treated as unparseable
MAX_ABUNDANCE = 2**32 - 1


def build_header(identifier: str, description: Optional[str] = None) -> str:
    """Rebuild the header text searched for the abundance tag"""
    return f"{identifier} {description or ''}"


def extract_abundance(header: str) -> Optional[int]:
    """Return the `ka:f:` abundance of a header, or None if absent or malformed"""
    match = ABUNDANCE_PATTERN.search(header)
    if not match:
        return None

    digits = match.group(1)
    # \d also matches non-ASCII digits, which are not valid abundances
    if not digits.isascii():
        return None

    abundance = int(digits)
    if abundance > MAX_ABUNDANCE:
        return None
    return abundance
