"""Exceptions raised by the k-mer histogram pipeline"""


class KmerHistogramError(Exception):
    """Base class for all fatal pipeline errors"""
    pass


class ConfigurationError(KmerHistogramError):
    """Raised when run parameters are invalid, before any record is read"""
    pass


class KmerSizeError(ConfigurationError):
    """Raised when k cannot be packed into a single 64-bit word"""
    pass


class RecordSourceError(KmerHistogramError):
    """Raised when the input file cannot be opened, decompressed or parsed"""
    pass
