import logging
from typing import List, Optional, Tuple

from bmsearch.search.base import SearchAlgorithm
from bmsearch.search.boyermoore import BoyerMoore
from bmsearch.search.preprocessing import fold_alphabet
from bmsearch.search.scan import scan

logger = logging.getLogger(__name__)

# Every single-byte symbol, in code point order
BYTE_ALPHABET = "".join(chr(code) for code in range(256))


class BoyerMooreSearch(SearchAlgorithm):
    """
    Boyer-Moore search over the lines of a text file.

    Uses the dense bad character rule and the strong good suffix rule. The
    preprocessing of the last pattern searched is kept, so repeated queries
    for the same pattern skip it.

    Args:
        file_path (str): Path to the file to search.
        alphabet (str, optional): Ordered symbols lines and patterns are drawn
            from. Defaults to every single-byte symbol.
        reread_on_query (bool, optional): Whether to reread the file for each query.
            Defaults to False.
        case_sensitive (bool, optional): Defaults to True. When False the
            alphabet is lower-cased along with lines and patterns.

    Attributes:
        alphabet (str): Alphabet handed to the matcher.

    Example:
        >>> searcher = BoyerMooreSearch('genome.txt', alphabet='ACGT')
        >>> searcher.search('TCTA')
        [(0, 6), (0, 14)]
        >>> searcher.get_stats()['alignments']
        5

    Note:
        A line holding a symbol outside the alphabet raises SymbolNotInAlphabet
        as soon as that symbol causes a mismatch.
    """
    def __init__(self, file_path: str, alphabet: Optional[str] = None,
                 reread_on_query: bool = False, case_sensitive: bool = True) -> None:
        self.alphabet = alphabet or BYTE_ALPHABET
        if not case_sensitive:
            self.alphabet = fold_alphabet(self.alphabet)
        self._matcher: Optional[BoyerMoore] = None
        self._matcher_pattern: Optional[str] = None
        super().__init__(file_path, reread_on_query, case_sensitive)

    def _get_matcher(self, pattern: str) -> BoyerMoore:
        if self._matcher is None or self._matcher_pattern != pattern:
            self._matcher = BoyerMoore(pattern, self.alphabet)
            self._matcher_pattern = pattern
        return self._matcher

    def _find_in_line(self, line: str, pattern: str) -> Tuple[List[int], int, int]:
        return scan(self._get_matcher(pattern), pattern, line)

    def search(self, query: str) -> List[Tuple[int, int]]:
        # Preprocess up front so a bad pattern fails even on an empty file
        self._get_matcher(query if self.case_sensitive else query.lower())
        results = super().search(query)
        logger.info(
            "Found %d occurrence(s) of %r in %d line(s): %d alignments, %d comparisons",
            len(results),
            query,
            self._stats["lines_processed"],
            self._stats["alignments"],
            self._stats["comparisons"],
        )
        return results
