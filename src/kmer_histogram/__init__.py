"""
Abundance-weighted k-mer histograms from annotated FASTA files.
"""

from .config import HistogramConfig
from .counter import AbundanceCounter
from .exceptions import (ConfigurationError, KmerHistogramError, KmerSizeError,
                         RecordSourceError)
from .fasta_io import SequenceRecord, open_sequence_file, read_records
from .headers import build_header, extract_abundance
from .histogram import HISTOGRAM_HEADER, Histogram, build_histogram, write_histogram
from .kmers import (MAX_K, canonical_kmer, decode_kmer, encode_kmer, iter_kmers,
                    reverse_complement_encoding, validate_k)
from .nucleotides import base_to_bits, complement_bits
from .pipeline import KmerHistogramBuilder, RunStats, run

__version__ = "0.1.0"
