"""
Command-line entry point.

Usage:
    kmer-histogram reads.fasta.zst 21 --canonical --limit 100
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import HistogramConfig
from .exceptions import KmerHistogramError
from .fasta_io import read_records
from .histogram import write_histogram
from .pipeline import KmerHistogramBuilder

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='kmer-histogram',
        description='Abundance-weighted k-mer frequency histogram from an annotated FASTA file')
    parser.add_argument('fasta_file',
                       help='Input FASTA file (.gz and .zst are decompressed, "-" reads stdin)')
    parser.add_argument('k', type=int, help='K-mer size (1-32)')
    parser.add_argument('-l', '--limit', type=int, default=None,
                       help='Maximum frequency to display')
    parser.add_argument('--canonical', action='store_true',
                       help='Count each k-mer together with its reverse complement')
    parser.add_argument('-o', '--output', default=None,
                       help='Write the histogram here instead of stdout')
    parser.add_argument('--verbose', action='store_true',
                       help='Enable verbose logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = HistogramConfig(k=args.k, canonical=args.canonical, limit=args.limit)
        builder = KmerHistogramBuilder(config)
        builder.consume(read_records(args.fasta_file))
        histogram = builder.histogram()
    except KmerHistogramError as e:
        logger.error(str(e))
        return 1

    rows = histogram.rows(config.limit)
    if args.output:
        with open(args.output, 'w') as f:
            written = write_histogram(rows, f)
        logger.info(f"Histogram written to {args.output}")
    else:
        written = write_histogram(rows, sys.stdout)
    logger.debug(f"Wrote {written} histogram rows")
    return 0


if __name__ == '__main__':
    sys.exit(main())
