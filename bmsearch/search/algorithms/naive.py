from typing import List, Tuple

from bmsearch.search.base import SearchAlgorithm


def brute_force_scan(pattern: str, text: str) -> Tuple[List[int], int, int]:
    """
    Tries every alignment of pattern in text, comparing left to right.

    Returns:
        Tuple[List[int], int, int]: occurrences, alignments, comparisons.

    Raises:
        ValueError: If pattern is empty.
    """
    if not pattern:
        raise ValueError("Empty patterns are not supported")

    m = len(pattern)
    occurrences: List[int] = []
    alignments = 0
    comparisons = 0

    for i in range(len(text) - m + 1):
        alignments += 1
        j = 0
        while j < m:
            comparisons += 1
            if text[i + j] != pattern[j]:
                break
            j += 1
        if j == m:
            occurrences.append(i)

    return occurrences, alignments, comparisons


class NaiveSearch(SearchAlgorithm):
    """Brute force line search, the reference result and baseline for Boyer-Moore."""

    def _find_in_line(self, line: str, pattern: str) -> Tuple[List[int], int, int]:
        return brute_force_scan(pattern, line)
