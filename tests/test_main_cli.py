from __future__ import annotations

import io
from pathlib import Path

import pytest

import main
from phonetics_to_hangul.domain.errors import WordLookupError
from phonetics_to_hangul.domain.hangul_compose import compose_lvt
from phonetics_to_hangul.services.settings_store import SettingsStore
from phonetics_to_hangul.services.word_lookup import LookedUpWord


@pytest.fixture
def settings_path(tmp_path: Path, corpus_file: Path) -> str:
    path = tmp_path / "settings.yaml"
    path.write_text(
        "corpus_path: {}\ncorpus_encoding: utf-8\n".format(corpus_file.as_posix()),
        encoding="utf-8",
    )
    return str(path)


def _run(*argv: str) -> tuple[int, list[str]]:
    out = io.StringIO()
    code = main.main(list(argv), out=out)
    return code, out.getvalue().splitlines()


def test_offline_lookup(settings_path: str) -> None:
    code, lines = _run("--settings", settings_path, "Hello")
    assert code == 0
    assert lines == ["Word: Hello", "Pronunciation: hʌloʊ", "한글: 허로우"]


def test_offline_several_words(settings_path: str) -> None:
    code, lines = _run("--settings", settings_path, "hello", "zzzqx")
    assert code == 0
    assert lines[1] == "Pronunciation: hʌloʊ ?"
    assert lines[2] == "한글: 허로우 ?"


def test_offline_word_not_found(settings_path: str) -> None:
    code, lines = _run("--settings", settings_path, "zzzqx")
    assert code == 1
    assert lines == ["The word is not in the dictionary."]


def test_offline_quoted_words_are_split(settings_path: str) -> None:
    code, lines = _run("--settings", settings_path, "cat dog")
    assert code == 0
    assert lines[0] == "Word: cat dog"
    assert lines[2] == "한글: {} {}".format(compose_lvt("ㄲ", "ㅐ", "ㅌ"), compose_lvt("ㄷ", "ㅓ", "ㄱ"))


def test_raw_ipa() -> None:
    code, lines = _run("--ipa", "kæt", "dɔɡ")
    assert code == 0
    assert lines == [
        "Pronunciation: kæt dɔɡ",
        "한글: {} {}".format(compose_lvt("ㄲ", "ㅐ", "ㅌ"), compose_lvt("ㄷ", "ㅓ", "ㄱ")),
    ]


def test_raw_ipa_quoted_words_stay_separate() -> None:
    code, lines = _run("--ipa", "kæt dɔɡ")
    assert code == 0
    assert lines == [
        "Pronunciation: kæt dɔɡ",
        "한글: {} {}".format(compose_lvt("ㄲ", "ㅐ", "ㅌ"), compose_lvt("ㄷ", "ㅓ", "ㄱ")),
    ]


def test_set_corpus_saves_settings(tmp_path: Path, corpus_file: Path) -> None:
    settings = tmp_path / "settings.yaml"
    code, lines = _run("--settings", str(settings), "--set-corpus", str(corpus_file), "--encoding", "utf-8")
    assert code == 0
    assert "6 entries" in lines[0]

    config = SettingsStore(str(settings)).get_config()
    assert config.corpus_path == corpus_file.resolve()
    assert config.corpus_encoding == "utf-8"

    code, lines = _run("--settings", str(settings), "dog")
    assert code == 0
    assert lines[1] == "Pronunciation: dɔɡ"


def test_set_corpus_rejects_missing_file(tmp_path: Path) -> None:
    settings = tmp_path / "settings.yaml"
    code, lines = _run("--settings", str(settings), "--set-corpus", str(tmp_path / "nope.txt"))
    assert code == 1
    assert lines[0].startswith("Dictionary corpus not found")
    assert not settings.exists()


class _FakeClient:
    instances: list["_FakeClient"] = []

    def __init__(self, user, password, *, base_url, timeout) -> None:
        self.args = (user, password, base_url, timeout)
        self.languages: list[str] = []
        self.closed = False
        _FakeClient.instances.append(self)

    def lookup(self, word: str, language: str) -> LookedUpWord:
        self.languages.append(language)
        if word == "missing":
            raise WordLookupError("The dictionary does not contain the word.")
        if word == "hot dog":
            return LookedUpWord(word=word, pronunciation="hɑt dɔɡ")
        return LookedUpWord(word=word, pronunciation="dɔɡ")

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client(monkeypatch):
    _FakeClient.instances = []
    monkeypatch.setattr(main, "LexicalaClient", _FakeClient)
    monkeypatch.setenv("DICT_USER", "alice")
    monkeypatch.setenv("DICT_PASS", "secret")
    return _FakeClient


def test_online_lookup(fake_client, tmp_path: Path) -> None:
    code, lines = _run("--settings", str(tmp_path / "settings.yaml"), "--online", "--lang", "de", "dog")
    assert code == 0
    assert lines == ["Word: dog", "Pronunciation: dɔɡ", "한글: " + compose_lvt("ㄷ", "ㅓ", "ㄱ")]
    client = fake_client.instances[0]
    assert client.args[:2] == ("alice", "secret")
    assert client.languages == ["de"]
    assert client.closed


def test_online_error_chain(fake_client, tmp_path: Path) -> None:
    code, lines = _run("--settings", str(tmp_path / "settings.yaml"), "--online", "missing")
    assert code == 1
    assert lines == ["Failed looking up the word.", "The dictionary does not contain the word."]
    assert fake_client.instances[0].closed


def test_online_requires_credentials(tmp_path: Path) -> None:
    code, lines = _run("--settings", str(tmp_path / "settings.yaml"), "--online", "dog")
    assert code == 1
    assert "DICT_USER" in lines[0]


def test_online_multi_word_pronunciation(fake_client, tmp_path: Path) -> None:
    code, lines = _run("--settings", str(tmp_path / "settings.yaml"), "--online", "hot dog")
    assert code == 0
    assert lines[1] == "Pronunciation: hɑt dɔɡ"
    assert lines[2].count(" ") == 2
