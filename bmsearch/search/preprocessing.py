import logging
from typing import Dict, List, Tuple

from bmsearch.search.errors import (
    InvalidAlphabet,
    InvalidPatternLength,
    SymbolNotInAlphabet,
)

logger = logging.getLogger(__name__)

# Highest code point accepted as a single-byte alphabet symbol
MAX_SYMBOL = 0xFF


def alphabet_map(alphabet: str) -> Dict[str, int]:
    """
    Maps each symbol of an ordered alphabet to its dense column index.

    Args:
        alphabet (str): Distinct single-byte symbols. Order defines the index.

    Returns:
        Dict[str, int]: symbol -> index in [0, len(alphabet)).

    Raises:
        InvalidAlphabet: If the alphabet is empty, repeats a symbol or contains
            a symbol outside the single-byte range.
    """
    if not alphabet:
        raise InvalidAlphabet(alphabet, "alphabet is empty")

    alpha_map: Dict[str, int] = {}
    for index, symbol in enumerate(alphabet):
        if ord(symbol) > MAX_SYMBOL:
            raise InvalidAlphabet(alphabet, f"{symbol!r} is not a single-byte symbol")
        if symbol in alpha_map:
            raise InvalidAlphabet(alphabet, f"{symbol!r} appears more than once")
        alpha_map[symbol] = index
    return alpha_map


def fold_alphabet(alphabet: str) -> str:
    """Lower-cases an alphabet for case-insensitive search, keeping the first
    occurrence of symbols that fold together ("ACGTacgt" -> "acgt")."""
    return "".join(dict.fromkeys(alphabet.lower()))


def z_array(string: str) -> List[int]:
    """
    Computes the Z array of a string with the linear time Z algorithm.

    Z[i] is the length of the longest substring starting at i that matches a
    prefix of the string. Z[0] is the string length by convention.

    Args:
        string (str): String of length > 1.

    Returns:
        List[int]: The Z array, same length as the string.

    Raises:
        InvalidPatternLength: If the string is not longer than 1 character.
    """
    length = len(string)
    if length <= 1:
        raise InvalidPatternLength(length)

    z_arr = [0] * length
    z_arr[0] = length

    # Initial comparison of string[1:] with the prefix
    for i in range(1, length):
        if string[i] != string[i - 1]:
            break
        z_arr[1] += 1

    right, left = 0, 0
    if z_arr[1] > 0:
        right = z_arr[1]
        left = 1

    for k in range(2, length):
        if k > right:
            # Outside the rightmost Z box, compare explicitly
            for i in range(k, length):
                if string[i] != string[i - k]:
                    break
                z_arr[k] += 1
            right = k + z_arr[k] - 1
            left = k
        elif (right - k + 1) > z_arr[k - left]:
            # Mirrored value lies strictly inside the box
            z_arr[k] = z_arr[k - left]
        else:
            # Compare characters just past right
            matches = 0
            for i in range(right + 1, length):
                if string[i] != string[i - k]:
                    break
                matches += 1
            left = k
            right += matches
            z_arr[k] = right - k + 1

    return z_arr


def n_array(string: str) -> List[int]:
    """
    Compiles the N array from the Z array of the reversed string.

    N[i] is the length of the longest suffix of string[:i + 1] which is also a
    suffix of the string.

    Raises:
        InvalidPatternLength: If the string is not longer than 1 character.
    """
    reversed_string = string[::-1]
    try:
        z_arr = z_array(reversed_string)
    except InvalidPatternLength as e:
        raise InvalidPatternLength(
            e.length, f'Failed to find Z array for string "{string}": {e}'
        ) from e

    n_arr = list(z_arr)
    n_arr.reverse()
    return n_arr


def big_l_prime_array(pattern: str, n_arr: List[int]) -> List[int]:
    """L'[i] is the largest 1-based index j such that N[j - 1] == len(pattern[i:]), or 0."""
    length = len(pattern)
    l_prime = [0] * length

    for j, n_j in enumerate(n_arr):
        i = length - n_j
        if i < length:
            l_prime[i] = j + 1

    return l_prime


def big_l_array(pattern: str, l_prime_arr: List[int]) -> List[int]:
    """L[i] is the largest 1-based index j such that N[j - 1] >= len(pattern[i:]), or 0."""
    length = len(pattern)
    l_arr = [0] * length
    l_arr[1] = l_prime_arr[1]

    for i in range(2, length):
        l_arr[i] = max(l_arr[i - 1], l_prime_arr[i])

    return l_arr


def small_l_prime_array(n_arr: List[int]) -> List[int]:
    """l'[i] is the length of the longest prefix of the pattern that is a suffix of pattern[i:]."""
    length = len(n_arr)
    small_l_prime_arr = [0] * length

    for i in range(length):
        # Prefix matching a suffix
        if n_arr[i] == i + 1:
            small_l_prime_arr[length - i - 1] = i + 1

    # Smear them out to the left
    carried = small_l_prime_arr[length - 1]
    for i in range(length - 2, -1, -1):
        if small_l_prime_arr[i] == 0:
            small_l_prime_arr[i] = carried
        carried = small_l_prime_arr[i]

    return small_l_prime_arr


def good_suffix_table(pattern: str) -> Tuple[List[int], List[int], List[int]]:
    """
    Builds the tables needed to apply the strong good suffix rule.

    Args:
        pattern (str): Pattern of length > 1.

    Returns:
        Tuple[List[int], List[int], List[int]]: The L', L and l' tables.

    Raises:
        InvalidPatternLength: If the pattern is not longer than 1 character.
    """
    n_arr = n_array(pattern)
    l_prime_arr = big_l_prime_array(pattern, n_arr)
    big_l_arr = big_l_array(pattern, l_prime_arr)
    small_l_prime_arr = small_l_prime_array(n_arr)

    logger.debug("Built good suffix tables for pattern of length %d", len(pattern))
    return l_prime_arr, big_l_arr, small_l_prime_arr


def dense_bad_char_table(pattern: str, alpha_map: Dict[str, int]) -> List[List[int]]:
    """
    Builds a dense bad character table, indexed by offset then by alphabet index.

    Row i holds, for every alphabet symbol, the 1-based position of its rightmost
    occurrence strictly before offset i (0 if it does not occur there).

    Args:
        pattern (str): Pattern of length > 1.
        alpha_map (Dict[str, int]): Alphabet symbol -> dense index.

    Returns:
        List[List[int]]: len(pattern) rows of len(alpha_map) columns.

    Raises:
        InvalidPatternLength: If the pattern is not longer than 1 character.
        SymbolNotInAlphabet: If a pattern character is not in the alphabet.
    """
    if len(pattern) <= 1:
        raise InvalidPatternLength(len(pattern))

    table: List[List[int]] = []
    last_seen = [0] * len(alpha_map)

    for i, character in enumerate(pattern):
        if character not in alpha_map:
            raise SymbolNotInAlphabet(character)

        table.append(list(last_seen))
        last_seen[alpha_map[character]] = i + 1

    logger.debug(
        "Built bad character table: %d rows x %d symbols", len(table), len(alpha_map)
    )
    return table
