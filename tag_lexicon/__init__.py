# tag_lexicon/__init__.py
"""
tag_lexicon
-----------

Public entrypoint for the tag lexicon.

This module re-exports the most common APIs so callers can do:

    from tag_lexicon import init_lexicon, get_possible_tags, is_known

without importing submodules individually.

Separation of concerns:
    - tagset.py: Tag / TagSchema and the Penn Treebank schema
    - readers.py: CoNLL and word/tag corpus readers
    - builder.py: one-shot construction of the word -> tags table
    - unknown.py: suffix-filtered fallback for unseen words
    - lexicon.py: immutable query surface (TagLexicon)
    - runtime.py: process-wide holder and init_lexicon()
"""

from __future__ import annotations

from .builder import LexiconBuilder
from .config import MalformedRecordPolicy, Settings, get_settings, set_settings
from .errors import (
    CorpusReadError,
    LexiconError,
    LexiconNotReadyError,
    MalformedRecordError,
    TagSchemaError,
)
from .lexicon import BuildStats, TagLexicon
from .readers import CorpusReader, Observation
from .runtime import (
    LexiconRuntime,
    get_lexicon,
    get_possible_tags,
    init_lexicon,
    is_known,
    is_ready,
)
from .tagset import PENN_SCHEMA, Tag, TagSchema
from .unknown import UnknownWordPolicy, base_unknown_set, candidates_for_unknown

__all__ = [
    # Entry point + queries
    "init_lexicon",
    "is_known",
    "get_possible_tags",
    "get_lexicon",
    "is_ready",
    "LexiconRuntime",
    # Building
    "LexiconBuilder",
    "TagLexicon",
    "BuildStats",
    "CorpusReader",
    "Observation",
    # Schema + unknown words
    "Tag",
    "TagSchema",
    "PENN_SCHEMA",
    "UnknownWordPolicy",
    "base_unknown_set",
    "candidates_for_unknown",
    # Config
    "Settings",
    "MalformedRecordPolicy",
    "get_settings",
    "set_settings",
    # Errors
    "LexiconError",
    "CorpusReadError",
    "MalformedRecordError",
    "TagSchemaError",
    "LexiconNotReadyError",
]
