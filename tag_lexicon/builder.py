# tag_lexicon/builder.py
"""
tag_lexicon/builder.py
======================

One-shot construction of a `TagLexicon` from tagged observations.

The builder owns the only mutable copy of the word -> tags table while a
build runs. When the observation stream is exhausted the table is frozen
into a `TagLexicon` and the working copy is dropped, so a half-populated
table is never visible to anyone.

Malformed records
-----------------
A record is malformed when it has no word, no tag, or a tag the schema
does not define. What happens next is set by `MalformedRecordPolicy`:

    skip      drop it and log a warning (default)
    fail      raise MalformedRecordError, aborting the build
    sentinel  record the word with the schema's sentinel tag

Error behaviour
---------------
- I/O problems while reading the corpus surface as `CorpusReadError`.
- Under the "fail" policy the first malformed record raises
  `MalformedRecordError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional, Set, Tuple, Union

import structlog

from .config import MalformedRecordPolicy, Settings, get_settings
from .errors import MalformedRecordError, TagSchemaError
from .lexicon import BuildStats, TagLexicon
from .readers import CorpusReader, Observation
from .tagset import PENN_SCHEMA, Tag, TagSchema
from .unknown import UnknownWordPolicy

logger = structlog.get_logger()

ObservationLike = Union[Observation, Tuple[Optional[str], Optional[str]]]


@dataclass
class _BuildState:
    table: Dict[str, Set[Tag]] = field(default_factory=dict)
    observations: int = 0
    skipped: int = 0
    sentinel_tagged: int = 0

    def stats(self, sentences: int) -> BuildStats:
        return BuildStats(
            sentences=sentences,
            observations=self.observations,
            skipped=self.skipped,
            sentinel_tagged=self.sentinel_tagged,
            words=len(self.table),
        )


class LexiconBuilder:
    """
    Builds immutable `TagLexicon` instances.

    A builder can be reused: every build starts from an empty table and
    returns a brand-new lexicon.
    """

    def __init__(
        self,
        schema: TagSchema = PENN_SCHEMA,
        settings: Optional[Settings] = None,
        *,
        malformed: Optional[MalformedRecordPolicy] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.schema = schema
        self.malformed = MalformedRecordPolicy(malformed or self.settings.MALFORMED_RECORDS)
        if self.malformed == MalformedRecordPolicy.SENTINEL and schema.sentinel is None:
            raise TagSchemaError("Sentinel policy requires a schema with a sentinel tag.")
        # Open-class base set, derived once per schema.
        self.policy = UnknownWordPolicy(schema)

    # ------------------------------------------------------------------
    # Record handling
    # ------------------------------------------------------------------

    def _malformed_detail(self, obs: Observation) -> Optional[str]:
        if not obs.word:
            return "missing word"
        if not obs.tag:
            return "missing tag"
        if obs.tag not in self.schema:
            return f"unknown tag '{obs.tag}'"
        return None

    def _record(self, state: _BuildState, obs: Observation, source: str) -> None:
        state.observations += 1
        detail = self._malformed_detail(obs)

        if detail is None:
            state.table.setdefault(obs.word, set()).add(self.schema.get(obs.tag))
            return

        if self.malformed == MalformedRecordPolicy.FAIL:
            raise MalformedRecordError(source, obs.line_no, detail)

        if self.malformed == MalformedRecordPolicy.SENTINEL and obs.word:
            state.table.setdefault(obs.word, set()).add(self.schema.sentinel)
            state.sentinel_tagged += 1
            return

        state.skipped += 1
        logger.warning(
            "malformed_record_skipped",
            source=source,
            line=obs.line_no,
            word=obs.word,
            detail=detail,
        )

    def _consume(
        self, observations: Iterable[ObservationLike], source: str
    ) -> _BuildState:
        state = _BuildState()
        for item in observations:
            obs = item if isinstance(item, Observation) else Observation(*item)
            self._record(state, obs, source)
        return state

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(
        self,
        observations: Iterable[ObservationLike],
        *,
        source: str = "<observations>",
    ) -> TagLexicon:
        """
        Consume `observations` to exhaustion and return the finished lexicon.

        Items may be `Observation` objects or plain (word, tag) tuples.
        """
        state = self._consume(observations, source)
        return TagLexicon(state.table, self.policy, state.stats(sentences=0))

    def build_from_reader(self, reader: CorpusReader) -> TagLexicon:
        """Build from a `CorpusReader`, recording its sentence count."""
        source = str(reader.path)
        logger.info("lexicon_build_started", source=source, format=reader.format_name)

        state = self._consume(reader.observations(), source)
        lexicon = TagLexicon(
            state.table, self.policy, state.stats(sentences=reader.sentences_read)
        )

        logger.info(
            "lexicon_build_completed",
            source=source,
            sentences=lexicon.stats.sentences,
            observations=lexicon.stats.observations,
            skipped=lexicon.stats.skipped,
            words=lexicon.stats.words,
        )
        return lexicon

    def build_from_file(
        self,
        path: Union[str, Path],
        use_conll: bool,
        *,
        separator: Optional[str] = None,
    ) -> TagLexicon:
        """Open `path` in the requested format and build from it."""
        reader = CorpusReader(
            path,
            use_conll,
            separator=separator or self.settings.TAG_SEPARATOR,
            encoding=self.settings.CORPUS_ENCODING,
        )
        return self.build_from_reader(reader)


__all__ = ["LexiconBuilder", "ObservationLike"]
