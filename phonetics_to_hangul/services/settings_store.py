from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from phonetics_to_hangul.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


def project_root() -> Path:
    # phonetics_to_hangul/services/settings_store.py -> services -> package -> <project_root>
    return Path(__file__).resolve().parents[2]


DEFAULT_CORPUS_PATH = project_root() / "data" / "cmudict-sample.txt"
DEFAULT_CORPUS_ENCODING = "latin-1"
DEFAULT_LANGUAGE = "en"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_BASE_URL = "https://dictapi.lexicala.com"

ENV_CORPUS_PATH = "HANGUL_CORPUS_PATH"
ENV_DICT_USER = "DICT_USER"
ENV_DICT_PASS = "DICT_PASS"


@dataclass(frozen=True)
class AppConfig:
    corpus_path: Path = DEFAULT_CORPUS_PATH
    corpus_encoding: str = DEFAULT_CORPUS_ENCODING
    language: str = DEFAULT_LANGUAGE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    base_url: str = DEFAULT_BASE_URL


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide a typed `AppConfig` view with defaults

    Layout of settings.yaml (every key optional):
        corpus_path: data/cmudict-0.7b.txt
        corpus_encoding: latin-1
        online:
          language: en
          timeout_seconds: 10
          base_url: https://dictapi.lexicala.com

    Notes:
      - HANGUL_CORPUS_PATH overrides `corpus_path`.
      - Dictionary credentials are never stored here; see `get_credentials()`.
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            # This resolves to: <project_root>/settings.yaml
            self._path = project_root() / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
        os.replace(str(tmp), str(p))

    def get_config(self) -> AppConfig:
        s = self.load()
        online = s.get("online") or {}
        if not isinstance(online, dict):
            logger.warning("Ignoring malformed 'online' settings: %r", online)
            online = {}

        def _str(source: dict[str, Any], key: str, default: str) -> str:
            v = source.get(key, default)
            if isinstance(v, str) and v.strip():
                return v.strip()
            logger.warning("Ignoring malformed setting '%s': %r", key, v)
            return default

        def _positive_float(source: dict[str, Any], key: str, default: float) -> float:
            v = source.get(key, default)
            if isinstance(v, (int, float)) and not isinstance(v, bool) and v > 0:
                return float(v)
            logger.warning("Ignoring malformed setting '%s': %r", key, v)
            return default

        corpus = (os.environ.get(ENV_CORPUS_PATH) or "").strip() or _str(s, "corpus_path", str(DEFAULT_CORPUS_PATH))
        corpus_path = Path(corpus).expanduser()
        if not corpus_path.is_absolute():
            corpus_path = project_root() / corpus_path

        return AppConfig(
            corpus_path=corpus_path,
            corpus_encoding=_str(s, "corpus_encoding", DEFAULT_CORPUS_ENCODING),
            language=_str(online, "language", DEFAULT_LANGUAGE),
            timeout_seconds=_positive_float(online, "timeout_seconds", DEFAULT_TIMEOUT_SECONDS),
            base_url=_str(online, "base_url", DEFAULT_BASE_URL).rstrip("/"),
        )


def get_credentials() -> tuple[str, str]:
    """Return (user, password) for the online dictionary from the environment."""
    user = (os.environ.get(ENV_DICT_USER) or "").strip()
    if not user:
        raise ConfigurationError(
            "For online usage, you need to provide the user name via the `{}` environment variable.".format(
                ENV_DICT_USER
            )
        )
    password = os.environ.get(ENV_DICT_PASS) or ""
    if not password:
        raise ConfigurationError(
            "For online usage, you need to provide the user's password via the `{}` environment variable.".format(
                ENV_DICT_PASS
            )
        )
    return user, password
