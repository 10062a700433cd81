# Auto-generated __init__.py

from . import accumulators
from .accumulators import CATEGORY_ORDER
from .accumulators import DEFAULT_ALGORITHM_NAMES
from .accumulators import DigestAlgorithm
from .accumulators import HashObjectDigest
from .accumulators import IncrementalDigest
from .accumulators import OneShotDigest
from .accumulators import XofDigest
from .accumulators import algorithm_names
from .accumulators import create_accumulators
from .accumulators import get_algorithm
from .accumulators import register_algorithm
from .accumulators import unregister_algorithm
from . import directory_hash
from .directory_hash import ProgressReporter
from .directory_hash import compute_directory_digests

__all__ = [
    "accumulators",
    "directory_hash",
    "CATEGORY_ORDER",
    "DEFAULT_ALGORITHM_NAMES",
    "DigestAlgorithm",
    "HashObjectDigest",
    "IncrementalDigest",
    "OneShotDigest",
    "ProgressReporter",
    "XofDigest",
    "algorithm_names",
    "compute_directory_digests",
    "create_accumulators",
    "get_algorithm",
    "register_algorithm",
    "unregister_algorithm",
]
