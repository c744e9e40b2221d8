# tag_lexicon/unknown.py
"""
Candidate tags for words that never occurred in the training corpus.

The fallback pool is every open-class tag of the schema. Two literal suffix
checks narrow it per word:

  * superlatives must end in "st"   -> otherwise drop JJS / RBS
  * 3rd-person singular verbs end in "s" -> otherwise drop VBZ

Words shorter than two characters match neither suffix.
"""

from __future__ import annotations

from typing import FrozenSet

from .errors import TagSchemaError
from .tagset import Tag, TagSchema

SUPERLATIVE_SUFFIX = "st"
THIRD_SINGULAR_SUFFIX = "s"
_MIN_SUFFIX_WORD_LENGTH = 2


def base_unknown_set(schema: TagSchema) -> FrozenSet[Tag]:
    """All open-class tags of `schema`."""
    return schema.open_tags()


def _ends_with(word: str, suffix: str) -> bool:
    return len(word) >= _MIN_SUFFIX_WORD_LENGTH and word.endswith(suffix)


def candidates_for_unknown(
    word: str, base: FrozenSet[Tag], schema: TagSchema
) -> FrozenSet[Tag]:
    """
    Narrow `base` for `word` with the suffix filters.

    `base` is left untouched; a new set is returned.
    """
    result = set(base)

    if not _ends_with(word, SUPERLATIVE_SUFFIX):
        result.discard(schema.adjective_superlative)
        result.discard(schema.adverb_superlative)

    if not _ends_with(word, THIRD_SINGULAR_SUFFIX):
        result.discard(schema.verb_third_singular)

    return frozenset(result)


class UnknownWordPolicy:
    """
    Caches the open-class base set of a schema and answers candidate
    queries for unknown words.

    Raises:
        TagSchemaError: the schema has two or fewer open-class tags, in
            which case the suffix filters could empty the candidate set.
    """

    def __init__(self, schema: TagSchema) -> None:
        base = base_unknown_set(schema)
        if len(base) <= 2:
            raise TagSchemaError(
                f"Schema needs more than two open-class tags for unknown words, got {len(base)}."
            )
        self._schema = schema
        self._base = base

    @property
    def schema(self) -> TagSchema:
        return self._schema

    @property
    def base(self) -> FrozenSet[Tag]:
        return self._base

    def candidates_for(self, word: str) -> FrozenSet[Tag]:
        return candidates_for_unknown(word, self._base, self._schema)


__all__ = [
    "SUPERLATIVE_SUFFIX",
    "THIRD_SINGULAR_SUFFIX",
    "base_unknown_set",
    "candidates_for_unknown",
    "UnknownWordPolicy",
]
