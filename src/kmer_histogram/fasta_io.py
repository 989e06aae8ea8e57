"""
FASTA record source.

Plain, gzip (.gz) and zstd (.zst) inputs are supported; "-" reads stdin.
Any failure to open, decompress, decode or parse the input is raised as a
RecordSourceError.
"""

import contextlib
import gzip
import io
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import ContextManager, Iterator, Optional, TextIO, Union

import zstandard
from Bio import SeqIO

from .exceptions import RecordSourceError

logger = logging.getLogger(__name__)

STDIN_PATH = '-'


@dataclass(frozen=True)
class SequenceRecord:
    """One FASTA record: identifier, optional description and raw bases"""
    id: str
    description: Optional[str]
    seq: bytes


def open_sequence_file(path: Union[str, Path]) -> ContextManager[TextIO]:
    """Open a FASTA file for text reading, decompressing by extension"""
    if str(path) == STDIN_PATH:
        return contextlib.nullcontext(sys.stdin)

    path = Path(path)
    if path.suffix == '.zst':
        # Files written by zstd may hold several concatenated frames
        reader = zstandard.ZstdDecompressor().stream_reader(
            open(path, 'rb'), read_across_frames=True, closefd=True)
        return io.TextIOWrapper(reader, encoding='utf-8')
    if path.suffix == '.gz':
        return gzip.open(path, 'rt', encoding='utf-8')
    return open(path, 'r', encoding='utf-8')


def _split_title(title: str):
    parts = title.split(None, 1)
    if not parts:
        return '', None
    if len(parts) == 1:
        return parts[0], None
    return parts[0], parts[1]


def read_records(path: Union[str, Path]) -> Iterator[SequenceRecord]:
    """Lazily yield SequenceRecords from a FASTA file"""
    logger.info(f"Reading sequences from {path}")
    try:
        with open_sequence_file(path) as handle:
            for record in SeqIO.parse(handle, "fasta"):
                # Biopython's description repeats the identifier
                identifier, description = _split_title(record.description)
                yield SequenceRecord(id=identifier or record.id,
                                     description=description,
                                     seq=bytes(record.seq))
    except (OSError, EOFError, UnicodeDecodeError, ValueError, zstandard.ZstdError) as e:
        raise RecordSourceError(f"Failed to read {path}: {e}") from e
