from __future__ import annotations

"""Online pronunciation lookup (Lexicala dictionary API).

Two requests per word: a search that yields entry ids, then the first
entry itself, whose headword carries an IPA pronunciation. The result is
plain IPA text for `ipa_to_hangul.convert()`.

Error bodies from the API look like `{"message": "..."}`.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import requests

from phonetics_to_hangul.domain.errors import WordLookupError
from phonetics_to_hangul.services.settings_store import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookedUpWord:
    word: str
    pronunciation: str


class LexicalaClient:
    def __init__(
        self,
        user: str,
        password: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.auth = (user, password)

    def _call_api(self, url: str, params: Optional[dict[str, str]] = None) -> Any:
        logger.debug("GET %s %s", url, params or {})
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            raise WordLookupError("Failed accessing the dictionary API.") from e

        try:
            data = response.json()
        except ValueError as e:
            raise WordLookupError("Failed parsing the response from the dictionary API.") from e

        if isinstance(data, dict) and isinstance(data.get("message"), str):
            raise WordLookupError(data["message"])
        if not isinstance(data, dict):
            raise WordLookupError("Failed parsing the response from the dictionary API.")
        return data

    def _search(self, word: str, language: str) -> str:
        try:
            data = self._call_api(
                "{}/search".format(self._base_url),
                params={"language": language, "text": word},
            )
        except WordLookupError as e:
            raise WordLookupError("Failed searching the word via the dictionary API.") from e

        results = data.get("results")
        if not isinstance(results, list):
            raise WordLookupError("Failed searching the word via the dictionary API.")
        if not results:
            raise WordLookupError("The dictionary does not contain the word.")
        entry_id = results[0].get("id") if isinstance(results[0], dict) else None
        if not isinstance(entry_id, str) or not entry_id:
            raise WordLookupError("Failed searching the word via the dictionary API.")
        return entry_id

    def _headword(self, entry_id: str) -> dict[str, Any]:
        try:
            entry = self._call_api("{}/entries/{}".format(self._base_url, quote(entry_id, safe="")))
        except WordLookupError as e:
            raise WordLookupError("Failed looking up the word's pronunciation via the dictionary API.") from e

        headword = entry.get("headword")
        if isinstance(headword, list):
            if not headword:
                raise WordLookupError("The word contains a list of words that is empty.")
            headword = headword[0]
        if not isinstance(headword, dict):
            raise WordLookupError("Failed parsing the response from the dictionary API.")
        return headword

    def lookup(self, word: str, language: str = "en") -> LookedUpWord:
        headword = self._headword(self._search(word, language))
        try:
            text = headword["text"]
            value = headword["pronunciation"]["value"]
        except (KeyError, TypeError) as e:
            raise WordLookupError("The entry has no pronunciation.") from e
        if not isinstance(text, str) or not isinstance(value, str):
            raise WordLookupError("The entry has no pronunciation.")

        # Several pronunciations come comma-separated; the first one wins.
        return LookedUpWord(word=text, pronunciation=value.split(",", 1)[0].strip())

    def close(self) -> None:
        self._session.close()
