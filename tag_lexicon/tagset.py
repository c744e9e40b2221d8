# tag_lexicon/tagset.py
"""
tag_lexicon/tagset.py

Tag schema definitions.

This module contains *no I/O*. It defines the `Tag` value object and the
`TagSchema` enumeration that the builder and the unknown-word policy are
parameterized with, plus the stock Penn Treebank schema.

A schema is an ordered, immutable inventory of tags. Each tag carries a
single attribute, `closed`:

    - closed-class tags (determiners, prepositions, punctuation, ...) have a
      fixed, enumerable membership and are never guessed for unseen words;
    - open-class tags (nouns, verbs, adjectives, ...) are productive and
      form the fallback pool for unknown words.

Besides the inventory, a schema names the three tags the suffix
heuristics act on (adjective superlative, adverb superlative and
third-person singular present verb) and a sentinel tag that the builder
can assign to records whose tag is unusable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, Optional, Sequence, Tuple

from .errors import TagSchemaError


@dataclass(frozen=True, order=True)
class Tag:
    """
    A part-of-speech tag drawn from a `TagSchema`.

    Tags sort by their position in the schema, so sorted tag sets come out
    in inventory order.
    """

    index: int
    name: str = field(compare=False)
    closed: bool = field(compare=False)

    def __str__(self) -> str:
        return self.name


class TagSchema:
    """
    Ordered, immutable tag inventory with closed/open classification.

    Args:
        tags: (name, closed) pairs in inventory order.
        adjective_superlative: name of the adjective-superlative tag.
        adverb_superlative: name of the adverb-superlative tag.
        verb_third_singular: name of the third-person-singular verb tag.
        sentinel: optional name of the tag used for unusable records.
    """

    def __init__(
        self,
        tags: Sequence[Tuple[str, bool]],
        *,
        adjective_superlative: str,
        adverb_superlative: str,
        verb_third_singular: str,
        sentinel: Optional[str] = None,
    ) -> None:
        by_name: Dict[str, Tag] = {}
        ordered = []
        for i, (name, closed) in enumerate(tags):
            if not name:
                raise TagSchemaError(f"Tag at position {i} has an empty name.")
            if name in by_name:
                raise TagSchemaError(f"Duplicate tag name '{name}' in schema.")
            tag = Tag(index=i, name=name, closed=bool(closed))
            by_name[name] = tag
            ordered.append(tag)

        self._tags: Tuple[Tag, ...] = tuple(ordered)
        self._by_name = by_name

        self.adjective_superlative: Tag = self.get(adjective_superlative)
        self.adverb_superlative: Tag = self.get(adverb_superlative)
        self.verb_third_singular: Tag = self.get(verb_third_singular)
        self.sentinel: Optional[Tag] = self.get(sentinel) if sentinel else None

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get(self, name: str) -> Tag:
        """Return the tag called `name`; raise TagSchemaError if there is none."""
        tag = self._by_name.get(name)
        if tag is None:
            raise TagSchemaError(f"Unknown tag '{name}'.")
        return tag

    def find(self, name: str) -> Optional[Tag]:
        return self._by_name.get(name)

    def all_tags(self) -> Tuple[Tag, ...]:
        return self._tags

    def open_tags(self) -> FrozenSet[Tag]:
        return frozenset(t for t in self._tags if not t.closed)

    def closed_tags(self) -> FrozenSet[Tag]:
        return frozenset(t for t in self._tags if t.closed)

    def tags_named(self, names: Iterable[str]) -> FrozenSet[Tag]:
        return frozenset(self.get(n) for n in names)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._by_name

    def __repr__(self) -> str:
        return f"TagSchema({len(self._tags)} tags, {len(self.open_tags())} open)"


# ---------------------------------------------------------------------------
# Penn Treebank
# ---------------------------------------------------------------------------

# -NONE-, -BEGIN- and -END- are pseudo tags used by parsers for padding and
# sentence boundaries. They are marked closed so they are never guessed.
PENN_TAGS: Tuple[Tuple[str, bool], ...] = (
    ("-NONE-", True),
    ("-BEGIN-", True),
    ("-END-", True),
    ("$", True),
    ("``", True),
    ("''", True),
    ("-LRB-", True),
    ("-RRB-", True),
    (",", True),
    (".", True),
    (":", True),
    ("#", True),
    ("CC", True),
    ("CD", False),
    ("DT", True),
    ("EX", True),
    ("FW", False),
    ("IN", True),
    ("JJ", False),
    ("JJR", False),
    ("JJS", False),
    ("LS", True),
    ("MD", True),
    ("NN", False),
    ("NNP", False),
    ("NNPS", False),
    ("NNS", False),
    ("PDT", True),
    ("POS", True),
    ("PRP", True),
    ("PRP$", True),
    ("RB", False),
    ("RBR", False),
    ("RBS", False),
    ("RP", True),
    ("SYM", True),
    ("TO", True),
    ("UH", True),
    ("VB", False),
    ("VBD", False),
    ("VBG", False),
    ("VBN", False),
    ("VBP", False),
    ("VBZ", False),
    ("WDT", True),
    ("WP", True),
    ("WP$", True),
    ("WRB", True),
)

PENN_SCHEMA = TagSchema(
    PENN_TAGS,
    adjective_superlative="JJS",
    adverb_superlative="RBS",
    verb_third_singular="VBZ",
    sentinel="-NONE-",
)


__all__ = ["Tag", "TagSchema", "PENN_TAGS", "PENN_SCHEMA"]
