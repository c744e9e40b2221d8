# tests/conftest.py
import pytest

from tag_lexicon.config import Settings, set_settings
from tag_lexicon.runtime import runtime

CONLL_CORPUS = """\
1\tThe\tthe\tDT\tDT\t_\t2\tNMOD
2\tcat\tcat\tNN\tNN\t_\t3\tSUB
3\truns\trun\tVB\tVBZ\t_\t0\tROOT
4\t.\t.\t.\t.\t_\t3\tP

1\tThe\tthe\tDT\tDT\t_\t2\tNMOD
2\truns\trun\tNN\tNNS\t_\t3\tSUB
3\tare\tbe\tVB\tVBP\t_\t0\tROOT
4\tfastest\tfast\tJJ\tJJS\t_\t3\tPRD
5\t.\t.\t.\t.\t_\t3\tP
"""

TAGGED_CORPUS = """\
The/DT cat/NN runs/VBZ ./.
The/DT runs/NNS are/VBP fastest/JJS ./.

1/2/CD of/IN them/PRP
"""


@pytest.fixture(autouse=True)
def clean_state():
    """Fresh settings and an uninitialized runtime for every test."""
    set_settings(Settings())
    runtime.reset()
    yield
    set_settings(None)
    runtime.reset()


@pytest.fixture
def conll_file(tmp_path):
    path = tmp_path / "train.conll"
    path.write_text(CONLL_CORPUS, encoding="utf-8")
    return path


@pytest.fixture
def tagged_file(tmp_path):
    path = tmp_path / "train.tagged"
    path.write_text(TAGGED_CORPUS, encoding="utf-8")
    return path
