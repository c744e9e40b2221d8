# tag_lexicon/errors.py
"""
tag_lexicon/errors.py
---------------------

Custom exception types for the tag lexicon.

These are intentionally small and descriptive so that callers can
distinguish between:

    - corpus loading problems
    - malformed corpus records (only raised under the "fail" policy)
    - tag schema problems
    - queries issued before a lexicon has been built

Typical usage:

    from tag_lexicon.errors import CorpusReadError, LexiconError

    try:
        lexicon = builder.build_from_file("train.conll", use_conll=True)
    except CorpusReadError as e:
        log.error("corpus_unreadable", error=str(e))
"""

from __future__ import annotations


class LexiconError(Exception):
    """
    Base class for all tag-lexicon errors.

    Catch this if you want to handle any lexicon problem in a single
    place; catch subclasses for more fine-grained handling.
    """


class CorpusReadError(LexiconError):
    """
    Raised when a training corpus cannot be opened or read.
    """

    def __init__(self, path: str, detail: str | None = None) -> None:
        msg = f"Cannot read corpus '{path}'."
        if detail:
            msg += f" Detail: {detail}"
        super().__init__(msg)
        self.path = path
        self.detail = detail


class MalformedRecordError(LexiconError):
    """
    Raised when a corpus record is missing its word or tag, or carries a
    tag that the schema does not know, and the build is configured to fail
    on such records.
    """

    def __init__(self, source: str, line_no: int, detail: str) -> None:
        super().__init__(f"Malformed record at {source}:{line_no}: {detail}")
        self.source = source
        self.line_no = line_no
        self.detail = detail


class TagSchemaError(LexiconError):
    """
    Raised for tag schema problems:
        - unknown tag names
        - duplicate tag names
        - too few open-class tags to guarantee a non-empty fallback
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class LexiconNotReadyError(LexiconError):
    """
    Raised when the process-wide lexicon is queried before a successful
    `init_lexicon` call (or after a failed one).
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "Tag lexicon is not initialized; call init_lexicon() first."
        )


__all__ = [
    "LexiconError",
    "CorpusReadError",
    "MalformedRecordError",
    "TagSchemaError",
    "LexiconNotReadyError",
]
