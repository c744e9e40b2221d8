# tag_lexicon/readers.py
"""
tag_lexicon/readers.py
======================

Corpus sources for the lexicon builder.

Two on-disk formats are supported:

  * CoNLL-X columnar files: one token per line, sentences separated by
    blank lines. Column 2 (FORM) is the word and column 5 (POSTAG) is the
    tag; every other column (lemma, features, heads, labels) is ignored.

        1   The     the     DT   DT   _   2   NMOD
        2   cat     cat     NN   NN   _   3   SUB

  * Tagged sentences: one sentence per line, tokens separated by
    whitespace, each token written as ``word<sep>tag``:

        The/DT cat/NN sat/VBD ./.

    The token is split at the *last* separator, so words that contain the
    separator themselves (``1/2/CD``) keep it.

Both readers yield sentences as lists of `Observation`. Records that
cannot be split into a word and a tag are still yielded, with the missing
part set to None; deciding what to do with them is the builder's job.

Error behaviour
---------------
- Opening or reading a file that is missing, unreadable or not decodable
  with the configured encoding raises `CorpusReadError`. So does an
  unknown encoding name, or a tag separator that is empty or contains
  whitespace.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

import structlog

from .config import get_settings
from .errors import CorpusReadError

logger = structlog.get_logger()

# CoNLL-X column positions (0-based)
CONLL_WORD_COLUMN = 1
CONLL_TAG_COLUMN = 4
_CONLL_EMPTY = "_"


@dataclass(frozen=True)
class Observation:
    """One (word, tag) record read from a corpus, with its source line."""

    word: Optional[str]
    tag: Optional[str]
    line_no: int = 0

    @property
    def is_complete(self) -> bool:
        return bool(self.word) and bool(self.tag)


Sentence = List[Observation]


# ---------------------------------------------------------------------------
# Line parsers
# ---------------------------------------------------------------------------


def parse_conll_line(line: str, line_no: int = 0) -> Observation:
    """
    Parse a single CoNLL-X token line.

    Columns are tab-separated; if the line has no tabs, any run of
    whitespace is accepted as a separator.
    """
    cols = line.split("\t") if "\t" in line else line.split()
    cols = [c.strip() for c in cols]

    word = cols[CONLL_WORD_COLUMN] if len(cols) > CONLL_WORD_COLUMN else None
    tag = cols[CONLL_TAG_COLUMN] if len(cols) > CONLL_TAG_COLUMN else None
    if tag == _CONLL_EMPTY:
        tag = None

    return Observation(word=word or None, tag=tag or None, line_no=line_no)


def parse_tagged_token(token: str, separator: str, line_no: int = 0) -> Observation:
    """Split ``word<sep>tag`` at the last separator."""
    word, sep, tag = token.rpartition(separator)
    if not sep:
        return Observation(word=token or None, tag=None, line_no=line_no)
    return Observation(word=word or None, tag=tag or None, line_no=line_no)


# ---------------------------------------------------------------------------
# Sentence iterators
# ---------------------------------------------------------------------------


def iter_conll_sentences(lines: Iterable[str]) -> Iterator[Sentence]:
    """Group CoNLL token lines into sentences separated by blank lines."""
    sentence: Sentence = []
    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            if sentence:
                yield sentence
                sentence = []
            continue
        sentence.append(parse_conll_line(line, line_no))
    if sentence:
        yield sentence


def valid_separator(separator: str) -> bool:
    return bool(separator) and not any(c.isspace() for c in separator)


def iter_tagged_sentences(lines: Iterable[str], separator: str) -> Iterator[Sentence]:
    """Yield one sentence per non-blank line of ``word<sep>tag`` tokens."""
    if not valid_separator(separator):
        raise ValueError("Tag separator must be non-empty and contain no whitespace.")
    for line_no, raw in enumerate(lines, start=1):
        tokens = raw.split()
        if not tokens:
            continue
        yield [parse_tagged_token(tok, separator, line_no) for tok in tokens]


# ---------------------------------------------------------------------------
# File-backed reader
# ---------------------------------------------------------------------------


class CorpusReader:
    """
    Iterates the sentences of a corpus file in either supported format.

    The file is opened lazily when iteration starts and closed when it
    ends. `sentences_read` counts the sentences yielded so far.
    """

    def __init__(
        self,
        path: Union[str, Path],
        use_conll: bool,
        *,
        separator: Optional[str] = None,
        encoding: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.path = Path(path)
        self.use_conll = use_conll
        self.separator = separator or settings.TAG_SEPARATOR
        self.encoding = encoding or settings.CORPUS_ENCODING
        self.sentences_read = 0

    @property
    def format_name(self) -> str:
        return "conll" if self.use_conll else "tagged"

    def __iter__(self) -> Iterator[Sentence]:
        if not self.use_conll and not valid_separator(self.separator):
            raise CorpusReadError(
                str(self.path), f"unusable tag separator {self.separator!r}"
            )
        try:
            with self.path.open("r", encoding=self.encoding) as f:
                logger.debug("corpus_opened", path=str(self.path), format=self.format_name)
                if self.use_conll:
                    sentences = iter_conll_sentences(f)
                else:
                    sentences = iter_tagged_sentences(f, self.separator)
                for sentence in sentences:
                    self.sentences_read += 1
                    yield sentence
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise CorpusReadError(str(self.path), str(e)) from e

    def observations(self) -> Iterator[Observation]:
        """Flatten the corpus into a single stream of observations."""
        for sentence in self:
            yield from sentence


__all__ = [
    "Observation",
    "Sentence",
    "CONLL_WORD_COLUMN",
    "CONLL_TAG_COLUMN",
    "parse_conll_line",
    "parse_tagged_token",
    "iter_conll_sentences",
    "valid_separator",
    "iter_tagged_sentences",
    "CorpusReader",
]
