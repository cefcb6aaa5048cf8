# tests/conftest.py
import os
from pathlib import Path

import pytest

# Window tests run headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from phonetics_to_hangul.domain.arpabet import Dictionary


_SAMPLE_CORPUS = """\
;;; # test corpus, cmudict-0.7b layout
CAT  K AE1 T
DOG  D AO1 G
EXAMPLE  IH0 G Z AE1 M P AH0 L
HELLO  HH AH0 L OW1
TEXT  T EH1 K S T
YEAH  Y AE1
"""


@pytest.fixture
def sample_corpus() -> str:
    return _SAMPLE_CORPUS


@pytest.fixture
def dictionary(sample_corpus: str) -> Dictionary:
    return Dictionary.parse(sample_corpus)


@pytest.fixture
def corpus_file(tmp_path: Path, sample_corpus: str) -> Path:
    path = tmp_path / "corpus.txt"
    path.write_text(sample_corpus, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep developer environment variables out of the tests."""
    for name in ("HANGUL_CORPUS_PATH", "DICT_USER", "DICT_PASS"):
        monkeypatch.delenv(name, raising=False)
