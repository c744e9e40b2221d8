# tag_lexicon/lexicon.py
"""
tag_lexicon/lexicon.py

Read-only query surface over a built word -> tag-set table.

Design goals
------------
- No filesystem knowledge (the builder handles I/O).
- Immutable once constructed: the table is exposed through a
  `MappingProxyType` over frozensets, so instances can be shared between
  threads without locking.
- Lookups never create entries: membership uses `Mapping.get`, so asking
  about a word leaves the table exactly as it was.
- Exact-string keys: no case folding, trimming or accent stripping.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, List, Mapping, Optional

from .tagset import Tag, TagSchema
from .unknown import UnknownWordPolicy


@dataclass(frozen=True)
class BuildStats:
    """Counters collected while building a lexicon."""

    sentences: int = 0
    observations: int = 0
    skipped: int = 0
    sentinel_tagged: int = 0
    words: int = 0


class TagLexicon:
    """
    Word -> possible-tags lexicon with an unknown-word fallback.

    Known words answer with exactly the tags they were observed with;
    unknown words answer with the policy's suffix-filtered open-class set.
    """

    def __init__(
        self,
        table: Mapping[str, FrozenSet[Tag]],
        policy: UnknownWordPolicy,
        stats: Optional[BuildStats] = None,
    ) -> None:
        frozen: Dict[str, FrozenSet[Tag]] = {
            word: frozenset(tags) for word, tags in table.items() if tags
        }
        self._table: Mapping[str, FrozenSet[Tag]] = MappingProxyType(frozen)
        self._policy = policy
        self._stats = stats or BuildStats(words=len(frozen))

    # ------------------------------------------------------------------
    # Query API
    # ------------------------------------------------------------------

    def is_known(self, word: str) -> bool:
        """True iff `word` was observed with at least one tag."""
        tags = self._table.get(word)
        return bool(tags)

    def get_possible_tags(self, word: str) -> FrozenSet[Tag]:
        """
        Tags `word` may carry.

        For known words this is the observed set; for unknown words it is
        the open-class fallback narrowed by suffix. Never empty.
        """
        tags = self._table.get(word)
        if tags:
            return tags
        return self._policy.candidates_for(word)

    def tag_names(self, word: str) -> List[str]:
        """Possible tags of `word` as names, in schema order."""
        return [t.name for t in sorted(self.get_possible_tags(word))]

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def schema(self) -> TagSchema:
        return self._policy.schema

    @property
    def policy(self) -> UnknownWordPolicy:
        return self._policy

    @property
    def table(self) -> Mapping[str, FrozenSet[Tag]]:
        return self._table

    @property
    def stats(self) -> BuildStats:
        return self._stats

    def words(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_known(word)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagLexicon):
            return NotImplemented
        return dict(self._table) == dict(other._table)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TagLexicon({len(self._table)} words)"


__all__ = ["BuildStats", "TagLexicon"]
