from __future__ import annotations

from pathlib import Path

from phonetics_to_hangul.domain.arpabet import Dictionary
from phonetics_to_hangul.domain.errors import ConfigurationError
from phonetics_to_hangul.services.settings_store import SettingsStore


def load_dictionary(
    path: Path | str | None = None,
    encoding: str | None = None,
    *,
    settings: SettingsStore | None = None,
) -> Dictionary:
    """Read and parse the pronunciation corpus.

    `path`/`encoding` default to the configured values. Parse failures
    propagate as `DictionaryParseError`.
    """
    if path is None or encoding is None:
        config = (settings or SettingsStore()).get_config()
        path = config.corpus_path if path is None else path
        encoding = config.corpus_encoding if encoding is None else encoding

    p = Path(path)
    try:
        text = p.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise ConfigurationError("Dictionary corpus not found: {}".format(p)) from e
    return Dictionary.parse(text)
