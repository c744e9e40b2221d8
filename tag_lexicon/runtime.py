# tag_lexicon/runtime.py
"""
tag_lexicon/runtime.py
----------------------

Process-wide lexicon holder and the `init_lexicon` entry point.

Lifecycle
=========
Two states only:

    Uninitialized --init_lexicon() ok--> Ready
    Ready         --init_lexicon() ok--> Ready (new lexicon swapped in)
    any           --init_lexicon() failed--> Uninitialized

A rebuild constructs the new lexicon completely before publishing it; the
swap is a single reference assignment under a lock. Readers grab the
current reference without locking, which is safe because a published
`TagLexicon` never changes.

Queries against an uninitialized runtime raise `LexiconNotReadyError`
rather than returning empty results.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import FrozenSet, Optional, Union

import structlog

from .builder import LexiconBuilder
from .config import Settings
from .errors import CorpusReadError, LexiconNotReadyError, MalformedRecordError
from .lexicon import TagLexicon
from .tagset import PENN_SCHEMA, Tag, TagSchema

logger = structlog.get_logger()


class LexiconRuntime:
    """
    Holds the lexicon currently in use by the process.
    """

    def __init__(self) -> None:
        self._lexicon: Optional[TagLexicon] = None
        self._lock = threading.RLock()

    def init_lexicon(
        self,
        path: Union[str, Path],
        use_conll: bool,
        *,
        separator: Optional[str] = None,
        schema: TagSchema = PENN_SCHEMA,
        settings: Optional[Settings] = None,
    ) -> bool:
        """
        Build a lexicon from `path` and make it current.

        Returns False if the corpus cannot be read or the build is aborted
        by a malformed record; the runtime is then left uninitialized.
        """
        with self._lock:
            try:
                builder = LexiconBuilder(schema, settings)
                lexicon = builder.build_from_file(path, use_conll, separator=separator)
            except (CorpusReadError, MalformedRecordError) as e:
                self._lexicon = None
                logger.error("lexicon_build_failed", path=str(path), error=str(e))
                return False

            self._lexicon = lexicon
            logger.info("lexicon_ready", path=str(path), words=len(lexicon))
            return True

    def set_lexicon(self, lexicon: TagLexicon) -> None:
        """Publish an already built lexicon (useful for tests and embedding)."""
        if lexicon is None:
            raise ValueError("Lexicon must be non-null.")
        with self._lock:
            self._lexicon = lexicon

    def reset(self) -> None:
        with self._lock:
            self._lexicon = None

    def is_ready(self) -> bool:
        return self._lexicon is not None

    def get_lexicon(self) -> TagLexicon:
        lexicon = self._lexicon
        if lexicon is None:
            raise LexiconNotReadyError()
        return lexicon

    def is_known(self, word: str) -> bool:
        return self.get_lexicon().is_known(word)

    def get_possible_tags(self, word: str) -> FrozenSet[Tag]:
        return self.get_lexicon().get_possible_tags(word)


# --- EXPORT THE SINGLETON ---
runtime = LexiconRuntime()


def init_lexicon(path: Union[str, Path], use_conll: bool, **kwargs) -> bool:
    return runtime.init_lexicon(path, use_conll, **kwargs)


def is_known(word: str) -> bool:
    return runtime.is_known(word)


def get_possible_tags(word: str) -> FrozenSet[Tag]:
    return runtime.get_possible_tags(word)


def get_lexicon() -> TagLexicon:
    return runtime.get_lexicon()


def is_ready() -> bool:
    return runtime.is_ready()


def reset() -> None:
    runtime.reset()


__all__ = [
    "LexiconRuntime",
    "runtime",
    "init_lexicon",
    "is_known",
    "get_possible_tags",
    "get_lexicon",
    "is_ready",
    "reset",
]
