# tests/test_unknown.py
import pytest

from tag_lexicon.errors import TagSchemaError
from tag_lexicon.tagset import PENN_SCHEMA, TagSchema
from tag_lexicon.unknown import UnknownWordPolicy, base_unknown_set, candidates_for_unknown

JJS = PENN_SCHEMA.get("JJS")
RBS = PENN_SCHEMA.get("RBS")
VBZ = PENN_SCHEMA.get("VBZ")


@pytest.fixture
def policy():
    return UnknownWordPolicy(PENN_SCHEMA)


def test_base_set_is_open_class_only():
    base = base_unknown_set(PENN_SCHEMA)
    assert base == PENN_SCHEMA.open_tags()
    assert all(not t.closed for t in base)


@pytest.mark.parametrize(
    "word, superlatives, vbz",
    [
        ("fastest", True, False),
        ("runs", False, True),
        ("cat", False, False),
        ("a", False, False),
        ("s", False, False),
        ("st", True, False),
        ("ss", False, True),
    ],
)
def test_suffix_filters(policy, word, superlatives, vbz):
    tags = policy.candidates_for(word)
    assert (JJS in tags) is superlatives
    assert (RBS in tags) is superlatives
    assert (VBZ in tags) is vbz


def test_other_open_tags_untouched(policy):
    expected = PENN_SCHEMA.open_tags() - {JJS, RBS, VBZ}
    assert policy.candidates_for("cat") == expected


def test_empty_word_gets_filtered_base(policy):
    assert policy.candidates_for("") == policy.candidates_for("a")


def test_base_never_mutated(policy):
    before = set(policy.base)
    for word in ("a", "cat", "runs", "fastest"):
        policy.candidates_for(word)
    assert set(policy.base) == before
    assert len(before) == 18


def test_function_form_leaves_base_alone():
    base = base_unknown_set(PENN_SCHEMA)
    result = candidates_for_unknown("cat", base, PENN_SCHEMA)
    assert result is not base
    assert VBZ in base
    assert VBZ not in result


def test_schema_with_too_few_open_tags():
    schema = TagSchema(
        [("DT", True), ("JJS", False), ("VBZ", False)],
        adjective_superlative="JJS",
        adverb_superlative="JJS",
        verb_third_singular="VBZ",
    )
    with pytest.raises(TagSchemaError):
        UnknownWordPolicy(schema)
