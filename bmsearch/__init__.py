__version__ = "0.1.0"

from bmsearch.search.boyermoore import BoyerMoore, build_matcher
from bmsearch.search.errors import (
    BoyerMooreError,
    InvalidAlphabet,
    InvalidOffset,
    InvalidPatternLength,
    SymbolNotInAlphabet,
)
from bmsearch.search.scan import AlignmentStep, ScanResult, iter_alignments, scan, search

__all__ = [
    "AlignmentStep",
    "BoyerMoore",
    "BoyerMooreError",
    "InvalidAlphabet",
    "InvalidOffset",
    "InvalidPatternLength",
    "ScanResult",
    "SymbolNotInAlphabet",
    "build_matcher",
    "iter_alignments",
    "scan",
    "search",
]
