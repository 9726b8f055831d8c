"""quick_union library initialization."""

from .structures import QuickUnion
from .pairs import normalize_pairs, infer_size
from .pipeline import ConnectivityAnalyzer, ConnectivityConfig, ConnectivityResult, ConnectivityStats
from .runner import connect_file

__all__ = [
    "QuickUnion",
    "normalize_pairs",
    "infer_size",
    "ConnectivityAnalyzer",
    "ConnectivityConfig",
    "ConnectivityResult",
    "ConnectivityStats",
    "connect_file",
]
