# tag_lexicon/cli.py
"""
Small CLI for inspecting a tag lexicon.

Usage:
    python -m tag_lexicon.cli <corpus> [word ...] [--tagged] [--separator SEP]

Without words on the command line, words are read from stdin, one per line.
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from tag_lexicon.logging_config import configure_logging
from tag_lexicon.runtime import LexiconRuntime


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tag-lexicon",
        description="Load a tagged corpus and show the possible tags of words.",
    )
    parser.add_argument("corpus", help="Path to the training corpus.")
    parser.add_argument("words", nargs="*", help="Words to look up (default: read stdin).")
    parser.add_argument(
        "--tagged",
        action="store_true",
        help="Corpus is in word/tag sentence format instead of CoNLL.",
    )
    parser.add_argument(
        "--separator",
        default=None,
        help="Word/tag separator for --tagged corpora (default from settings).",
    )
    return parser.parse_args(argv)


def _describe(rt: LexiconRuntime, word: str) -> str:
    lexicon = rt.get_lexicon()
    state = "known" if lexicon.is_known(word) else "unknown"
    return f"{word}\t{state}\t{' '.join(lexicon.tag_names(word))}"


def _iter_words(args_words: List[str], stdin: TextIO) -> Iterable[str]:
    if args_words:
        yield from args_words
        return
    for line in stdin:
        word = line.strip()
        if word:
            yield word


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging()

    rt = LexiconRuntime()
    if not rt.init_lexicon(args.corpus, not args.tagged, separator=args.separator):
        print(f"Could not load lexicon from '{args.corpus}'.", file=sys.stderr)
        return 1

    for word in _iter_words(args.words, sys.stdin):
        print(_describe(rt, word))
    return 0


if __name__ == "__main__":
    sys.exit(main())
