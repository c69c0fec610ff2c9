from hypothesis import given, strategies as st

from bmsearch.search.algorithms.naive import brute_force_scan
from bmsearch.search.boyermoore import BoyerMoore
from bmsearch.search.preprocessing import good_suffix_table, z_array
from bmsearch.search.scan import iter_alignments, scan

ALPHABET = "ACGT"

patterns = st.text(alphabet=ALPHABET, min_size=2, max_size=20)
texts = st.text(alphabet=ALPHABET, max_size=200)
# Small alphabets produce many self-overlapping patterns
binary_patterns = st.text(alphabet="AC", min_size=2, max_size=12)
binary_texts = st.text(alphabet="AC", max_size=120)


def brute_force_z(string):
    z = [len(string)]
    for i in range(1, len(string)):
        length = 0
        while i + length < len(string) and string[length] == string[i + length]:
            length += 1
        z.append(length)
    return z


@given(st.text(alphabet="ab", min_size=2, max_size=40))
def test_z_array_matches_brute_force(string):
    assert z_array(string) == brute_force_z(string)


@given(patterns)
def test_table_lengths_and_bounds(pattern):
    m = len(pattern)
    matcher = BoyerMoore(pattern, ALPHABET)
    l_prime, big_l, small_l_prime = good_suffix_table(pattern)

    assert len(l_prime) == len(big_l) == len(small_l_prime) == m
    assert len(matcher.bad_char) == m
    for i in range(m):
        assert big_l[i] <= m
        assert small_l_prime[i] <= m - i
    for i in range(2, m):
        assert big_l[i] >= big_l[i - 1]
    for i, row in enumerate(matcher.bad_char):
        assert all(0 <= last_seen <= i for last_seen in row)


@given(patterns)
def test_shift_queries_are_positive_and_bounded(pattern):
    m = len(pattern)
    matcher = BoyerMoore(pattern, ALPHABET)
    for offset in range(m):
        for symbol in ALPHABET:
            assert 1 <= matcher.bad_char_rule(offset, symbol) <= offset + 1
        assert 0 <= matcher.good_suffix_rule(offset) <= m
    assert 1 <= matcher.match_skip() <= m


@given(patterns, texts)
def test_scan_matches_brute_force(pattern, text):
    expected = brute_force_scan(pattern, text)[0]
    assert scan(BoyerMoore(pattern, ALPHABET), pattern, text).occurrences == expected


@given(binary_patterns, binary_texts)
def test_overlapping_occurrences_not_skipped(pattern, text):
    occurrences, alignments, _ = scan(BoyerMoore(pattern, "AC"), pattern, text)
    expected, naive_alignments, _ = brute_force_scan(pattern, text)
    assert occurrences == expected
    assert alignments <= naive_alignments


@given(patterns, texts)
def test_alignments_stay_inside_text(pattern, text):
    matcher = BoyerMoore(pattern, ALPHABET)
    for step in iter_alignments(matcher, pattern, text):
        assert 0 <= step.offset <= len(text) - len(pattern)
        assert 1 <= step.shift <= len(pattern)
        assert 1 <= step.comparisons <= len(pattern)


@given(patterns)
def test_construction_is_a_pure_function(pattern):
    first = BoyerMoore(pattern, ALPHABET)
    second = BoyerMoore(pattern, ALPHABET)
    assert (first.bad_char, first.big_l, first.small_l_prime) == (
        second.bad_char, second.big_l, second.small_l_prime
    )
