import logging
from typing import Dict, Tuple

from bmsearch.search.errors import InvalidOffset, SymbolNotInAlphabet
from bmsearch.search.preprocessing import (
    alphabet_map,
    dense_bad_char_table,
    good_suffix_table,
)

logger = logging.getLogger(__name__)


class BoyerMoore:
    """
    Encapsulates a pattern's Boyer-Moore preprocessing.

    Builds the dense bad character table and the strong good suffix tables
    (L and l') once, then answers shift queries for a mismatch at a given
    pattern offset. Nothing is mutated after construction, so one instance can
    be shared by any number of scans.

    Args:
        pattern (str): Pattern to preprocess, longer than 1 character.
        alphabet (str): Ordered distinct symbols. Every pattern character, and
            every character later passed to `bad_char_rule`, must be one of them.

    Raises:
        InvalidAlphabet: If the alphabet is empty or malformed.
        InvalidPatternLength: If the pattern is not longer than 1 character.
        SymbolNotInAlphabet: If a pattern character is not in the alphabet.

    Example:
        >>> bm = BoyerMoore("ACTGTC", "ACGT")
        >>> bm.bad_char_rule(4, "C")
        3
    """

    __slots__ = ("_pattern", "_alphabet", "_alpha_map", "_bad_char", "_big_l", "_small_l_prime")

    def __init__(self, pattern: str, alphabet: str) -> None:
        alpha_map = alphabet_map(alphabet)
        bad_char = dense_bad_char_table(pattern, alpha_map)
        _, big_l, small_l_prime = good_suffix_table(pattern)

        self._pattern = pattern
        self._alphabet = alphabet
        self._alpha_map: Dict[str, int] = alpha_map
        self._bad_char: Tuple[Tuple[int, ...], ...] = tuple(tuple(row) for row in bad_char)
        self._big_l: Tuple[int, ...] = tuple(big_l)
        self._small_l_prime: Tuple[int, ...] = tuple(small_l_prime)
        logger.debug(
            "Preprocessed pattern of length %d over alphabet of %d symbols",
            len(pattern),
            len(alpha_map),
        )

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def pattern_length(self) -> int:
        return len(self._big_l)

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def bad_char(self) -> Tuple[Tuple[int, ...], ...]:
        return self._bad_char

    @property
    def big_l(self) -> Tuple[int, ...]:
        return self._big_l

    @property
    def small_l_prime(self) -> Tuple[int, ...]:
        return self._small_l_prime

    def _check_offset(self, offset: int) -> None:
        if offset < 0 or offset >= self.pattern_length:
            raise InvalidOffset(offset, self.pattern_length)

    def bad_char_rule(self, offset: int, character: str) -> int:
        """
        Returns the shift given by the bad character rule for a mismatch at offset.

        Aligns the mismatched text character with its rightmost occurrence in
        the pattern before offset, or moves the pattern past it entirely.

        Raises:
            SymbolNotInAlphabet: If character is not in the alphabet.
            InvalidOffset: If offset is negative or not less than the pattern length.
        """
        if character not in self._alpha_map:
            raise SymbolNotInAlphabet(character)
        self._check_offset(offset)

        # last_seen <= offset, so the shift is at least 1
        last_seen = self._bad_char[offset][self._alpha_map[character]]
        return offset - (last_seen - 1)

    def good_suffix_rule(self, offset: int) -> int:
        """
        Returns the shift given by the strong good suffix rule for a mismatch at offset.

        Raises:
            InvalidOffset: If offset is negative or not less than the pattern length.
        """
        self._check_offset(offset)
        length = self.pattern_length

        if offset == length - 1:
            return 0

        # Leftmost position of the matched suffix
        offset += 1

        if self._big_l[offset] > 0:
            return length - self._big_l[offset]

        return length - self._small_l_prime[offset]

    def match_skip(self) -> int:
        """Returns the shift to apply after a full match of the pattern."""
        return self.pattern_length - self._small_l_prime[1]

    def __repr__(self) -> str:
        return f"BoyerMoore(pattern_length={self.pattern_length}, alphabet={self._alphabet!r})"


def build_matcher(pattern: str, alphabet: str) -> BoyerMoore:
    """Preprocesses pattern over alphabet. See `BoyerMoore` for the errors raised."""
    return BoyerMoore(pattern, alphabet)
