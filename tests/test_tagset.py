# tests/test_tagset.py
import pytest

from tag_lexicon.errors import TagSchemaError
from tag_lexicon.tagset import PENN_SCHEMA, TagSchema

PENN_OPEN = {
    "CD", "FW", "JJ", "JJR", "JJS", "NN", "NNP", "NNPS", "NNS",
    "RB", "RBR", "RBS", "VB", "VBD", "VBG", "VBN", "VBP", "VBZ",
}


class TestPennSchema:
    def test_open_class_inventory(self):
        assert {t.name for t in PENN_SCHEMA.open_tags()} == PENN_OPEN

    def test_pseudo_tags_are_closed(self):
        for name in ("-NONE-", "-BEGIN-", "-END-"):
            assert PENN_SCHEMA.get(name).closed

    def test_closed_and_open_partition_the_schema(self):
        open_tags = PENN_SCHEMA.open_tags()
        closed_tags = PENN_SCHEMA.closed_tags()
        assert not open_tags & closed_tags
        assert open_tags | closed_tags == set(PENN_SCHEMA.all_tags())

    def test_heuristic_tags(self):
        assert PENN_SCHEMA.adjective_superlative.name == "JJS"
        assert PENN_SCHEMA.adverb_superlative.name == "RBS"
        assert PENN_SCHEMA.verb_third_singular.name == "VBZ"
        assert PENN_SCHEMA.sentinel.name == "-NONE-"

    def test_tags_sort_in_schema_order(self):
        tags = PENN_SCHEMA.tags_named(["VBZ", "DT", "NN"])
        assert [t.name for t in sorted(tags)] == ["DT", "NN", "VBZ"]

    def test_lookup(self):
        assert "NN" in PENN_SCHEMA
        assert "XYZ" not in PENN_SCHEMA
        assert PENN_SCHEMA.find("XYZ") is None
        assert str(PENN_SCHEMA.get("PRP$")) == "PRP$"
        with pytest.raises(TagSchemaError):
            PENN_SCHEMA.get("XYZ")


class TestCustomSchema:
    def test_duplicate_names_rejected(self):
        with pytest.raises(TagSchemaError):
            TagSchema(
                [("A", False), ("A", True)],
                adjective_superlative="A",
                adverb_superlative="A",
                verb_third_singular="A",
            )

    def test_heuristic_tag_must_exist(self):
        with pytest.raises(TagSchemaError):
            TagSchema(
                [("N", False), ("V", False)],
                adjective_superlative="SUP",
                adverb_superlative="N",
                verb_third_singular="V",
            )

    def test_sentinel_is_optional(self):
        schema = TagSchema(
            [("N", False), ("V", False), ("S", False)],
            adjective_superlative="S",
            adverb_superlative="S",
            verb_third_singular="V",
        )
        assert schema.sentinel is None
        assert len(schema) == 3
