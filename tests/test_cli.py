# tests/test_cli.py
import io

import pytest
import structlog

from tag_lexicon import cli


@pytest.fixture(autouse=True)
def restore_structlog():
    yield
    structlog.reset_defaults()


def test_words_from_argv(conll_file, capsys):
    assert cli.main([str(conll_file), "runs", "cat", "dog"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "runs\tknown\tNNS VBZ"
    assert lines[1] == "cat\tknown\tNN"
    word, state, tags = lines[2].split("\t")
    assert (word, state) == ("dog", "unknown")
    assert "VBZ" not in tags.split()
    assert "NN" in tags.split()


def test_words_from_stdin(tagged_file, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1/2\n\nfastest\n"))
    assert cli.main([str(tagged_file), "--tagged"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["1/2\tknown\tCD", "fastest\tknown\tJJS"]


def test_custom_separator(tmp_path, capsys):
    path = tmp_path / "pipe.tagged"
    path.write_text("dogs|NNS\n", encoding="utf-8")
    assert cli.main([str(path), "dogs", "--tagged", "--separator", "|"]) == 0
    assert capsys.readouterr().out.strip() == "dogs\tknown\tNNS"


def test_missing_corpus(tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing.conll"), "cat"]) == 1
    assert "Could not load lexicon" in capsys.readouterr().err
