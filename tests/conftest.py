import gzip

import pytest
import zstandard

from kmer_histogram import SequenceRecord

EXAMPLE_FASTA = """>read_1 ka:f:2
ACGTACGT
"""


def make_record(seq, description=None, identifier="read_1"):
    if isinstance(seq, str):
        seq = seq.encode('ascii')
    return SequenceRecord(id=identifier, description=description, seq=seq)


@pytest.fixture
def write_fasta(tmp_path):
    """Write FASTA text to a plain, .gz or .zst file and return its path"""
    def _write(text, name="reads.fasta"):
        path = tmp_path / name
        data = text.encode('utf-8')
        if name.endswith('.gz'):
            with gzip.open(path, 'wb') as f:
                f.write(data)
        elif name.endswith('.zst'):
            path.write_bytes(zstandard.ZstdCompressor().compress(data))
        else:
            path.write_bytes(data)
        return path
    return _write
