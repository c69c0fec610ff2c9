"""
Batch command line front end.

Searches a pattern either in a text given on the command line or in every
line of a text file, and prints the occurrences with the alignment and
comparison counts.
"""

import argparse
import sys
from typing import List, Optional

from bmsearch.config.config import DEFAULT_CONFIG_FILE, Config, ConfigError
from bmsearch.search.algorithms.boyermoore import BoyerMooreSearch
from bmsearch.search.boyermoore import BoyerMoore
from bmsearch.search.errors import BoyerMooreError
from bmsearch.search.preprocessing import fold_alphabet
from bmsearch.search.scan import iter_alignments


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Boyer-Moore exact substring search")
    parser.add_argument("-c", "--config", default=DEFAULT_CONFIG_FILE,
                        help="Configuration INI file")
    parser.add_argument("-p", "--pattern", required=True, help="Pattern to search for")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-t", "--text", help="Text to search in")
    source.add_argument("-f", "--text-file",
                        help="File whose lines are searched (defaults to SEARCH.TEXT_PATH)")
    parser.add_argument("-a", "--alphabet", help="Override the configured alphabet")
    parser.add_argument("--trace", action="store_true",
                        help="Log every alignment with the shifts applied (with --text)")
    return parser.parse_args(argv)


def search_text(config: Config, pattern: str, text: str, alphabet: str, trace: bool) -> None:
    if not config.case_sensitive:
        pattern = pattern.lower()
        text = text.lower()
        alphabet = fold_alphabet(alphabet)

    matcher = BoyerMoore(pattern, alphabet)
    occurrences = []
    alignments = 0
    comparisons = 0

    for step in iter_alignments(matcher, pattern, text):
        alignments += 1
        comparisons += step.comparisons
        if step.matched:
            occurrences.append(step.offset)
        if trace:
            config.logger.info(
                "Alignment %d at offset %d: %s, comparisons %d, bad character shift %d, "
                "good suffix shift %d",
                alignments,
                step.offset,
                "match" if step.matched else f"mismatch at pattern index {step.mismatch_index}",
                step.comparisons,
                step.bad_char_shift,
                step.good_suffix_shift,
            )

    print(f"Text length: {len(text)}")
    print(f"Pattern length: {len(pattern)}")
    print(f"Occurrences: {occurrences}")
    print(f"Alignments: {alignments}")
    print(f"Comparisons: {comparisons}")


def search_file(config: Config, pattern: str, text_file: str, alphabet: str) -> None:
    searcher = BoyerMooreSearch(
        text_file,
        alphabet=alphabet,
        reread_on_query=config.reread_on_query,
        case_sensitive=config.case_sensitive,
    )
    results = searcher.search(pattern)
    stats = searcher.get_stats()

    print(f"Lines: {stats['lines_processed']}")
    print(f"Pattern length: {len(pattern)}")
    print(f"Occurrences: {[f'{line}:{offset}' for line, offset in results]}")
    print(f"Alignments: {stats['alignments']}")
    print(f"Comparisons: {stats['comparisons']}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = Config(args.config)
    except ConfigError as e:
        print(f"Failed to load configuration: {e}", file=sys.stderr)
        return 1

    alphabet = args.alphabet or config.alphabet
    text_file = args.text_file or (None if args.text is not None else config.text_path)

    try:
        if args.text is not None:
            search_text(config, args.pattern, args.text, alphabet, args.trace)
        elif text_file:
            search_file(config, args.pattern, text_file, alphabet)
        else:
            config.logger.error("No text to search: pass --text, --text-file or set SEARCH.TEXT_PATH")
            return 1
    except (BoyerMooreError, OSError, RuntimeError) as e:
        error = e
        while error is not None:
            config.logger.error("%s", error)
            error = error.__cause__
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
