import logging
from typing import Iterator, List, NamedTuple

from bmsearch.search.boyermoore import BoyerMoore

logger = logging.getLogger(__name__)


class AlignmentStep(NamedTuple):
    """
    State of the scan at one alignment of the pattern against the text.

    Attributes:
        offset (int): Text offset the pattern is aligned at.
        mismatch_index (int): Pattern index of the first (rightmost) mismatch,
            or -1 when the whole pattern matched.
        matched (bool): True when the pattern occurs at offset.
        bad_char_shift (int): Shift proposed by the bad character rule (0 on a match).
        good_suffix_shift (int): Shift proposed by the good suffix rule, or the
            match skip on a full match.
        shift (int): Shift actually applied, at least 1.
        comparisons (int): Character comparisons made at this alignment.
    """
    offset: int
    mismatch_index: int
    matched: bool
    bad_char_shift: int
    good_suffix_shift: int
    shift: int
    comparisons: int


class ScanResult(NamedTuple):
    occurrences: List[int]
    alignments: int
    comparisons: int


def iter_alignments(matcher: BoyerMoore, pattern: str, text: str) -> Iterator[AlignmentStep]:
    """
    Slides pattern across text, yielding one `AlignmentStep` per alignment.

    The pattern is compared right to left. On a mismatch the larger of the
    bad character and good suffix shifts is applied; after a full match the
    match skip is applied. Shifts are floored at 1.

    Args:
        matcher (BoyerMoore): Preprocessing of pattern.
        pattern (str): The pattern matcher was built from.
        text (str): Text to scan.

    Raises:
        ValueError: If pattern is not the pattern matcher was built from.
        SymbolNotInAlphabet: If a mismatched text character is not in the alphabet.
    """
    pattern_length = len(pattern)
    if pattern_length != matcher.pattern_length:
        raise ValueError(
            f"Pattern of length {pattern_length} does not fit a matcher built "
            f"for length {matcher.pattern_length}"
        )
    if pattern != matcher.pattern:
        raise ValueError(
            f"Pattern {pattern!r} differs from the pattern {matcher.pattern!r} "
            f"the matcher was built for"
        )

    last_offset = len(text) - pattern_length
    i = 0
    while i <= last_offset:
        comparisons = 0
        mismatch_index = -1
        skip_bc = 0
        skip_gs = 0

        for j in range(pattern_length - 1, -1, -1):
            comparisons += 1
            if pattern[j] != text[i + j]:
                mismatch_index = j
                break

        if mismatch_index >= 0:
            skip_bc = matcher.bad_char_rule(mismatch_index, text[i + mismatch_index])
            skip_gs = matcher.good_suffix_rule(mismatch_index)
            shift = max(1, skip_bc, skip_gs)
        else:
            skip_gs = matcher.match_skip()
            shift = max(1, skip_gs)

        step = AlignmentStep(
            offset=i,
            mismatch_index=mismatch_index,
            matched=mismatch_index < 0,
            bad_char_shift=skip_bc,
            good_suffix_shift=skip_gs,
            shift=shift,
            comparisons=comparisons,
        )
        logger.debug(
            "Alignment at %d: %s, bad char %d, good suffix %d, shift %d",
            i,
            "match" if step.matched else f"mismatch at {mismatch_index}",
            skip_bc,
            skip_gs,
            shift,
        )
        yield step
        i += shift


def scan(matcher: BoyerMoore, pattern: str, text: str) -> ScanResult:
    """
    Finds all occurrences of pattern in text.

    Returns:
        ScanResult: Ordered occurrence offsets, alignments attempted and
            character comparisons performed.

    Raises:
        SymbolNotInAlphabet: If a mismatched text character is not in the
            alphabet. No partial result is returned.
    """
    occurrences: List[int] = []
    alignments = 0
    comparisons = 0

    for step in iter_alignments(matcher, pattern, text):
        alignments += 1
        comparisons += step.comparisons
        if step.matched:
            occurrences.append(step.offset)

    return ScanResult(occurrences, alignments, comparisons)


def search(pattern: str, text: str, alphabet: str) -> List[int]:
    """Builds a matcher for pattern and returns its occurrences in text."""
    return scan(BoyerMoore(pattern, alphabet), pattern, text).occurrences
