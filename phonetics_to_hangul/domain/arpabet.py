from __future__ import annotations

"""Pronunciation dictionary in the CMU (cmudict-0.7b) text format.

Corpus format:
    ;;; comment line
    WORD  SYM SYM SYM

i.e. a word, exactly two spaces, then space-separated ARPABET symbols
(optionally suffixed with a stress digit).

Lookups are case-insensitive and yield the pronunciation as IPA
characters, ready to be fed to `ipa_to_hangul.convert()`.
"""

from typing import Final, Iterator, Optional

from phonetics_to_hangul.domain.errors import DictionaryParseError, UnknownArpabetSymbolError


COMMENT_MARKER: Final[str] = ";;;"
FIELD_SEPARATOR: Final[str] = "  "

_ARPABET_TO_IPA: Final[dict[str, str]] = {
    "AA": "ɑ",
    "AE": "æ",
    "AH": "ʌ",
    "AO": "ɔ",
    "AW": "aʊ",
    "AY": "aɪ",
    "B": "b",
    "CH": "tʃ",
    "D": "d",
    "DH": "ð",
    "EH": "ɛ",
    "ER": "ɝ",
    "EY": "eɪ",
    "F": "f",
    "G": "ɡ",
    "HH": "h",
    "IH": "ɪ",
    "IY": "i",
    "JH": "dʒ",
    "K": "k",
    "L": "l",
    "M": "m",
    "N": "n",
    "NG": "ŋ",
    "OW": "oʊ",
    "OY": "ɔɪ",
    "P": "p",
    "R": "ɹ",
    "S": "s",
    "SH": "ʃ",
    "T": "t",
    "TH": "θ",
    "UH": "ʊ",
    "UW": "u",
    "V": "v",
    "W": "w",
    "Y": "j",
    "Z": "z",
    "ZH": "ʒ",
}


def arpabet_to_ipa(symbol: str) -> str:
    """Translate one ARPABET symbol (stress digit allowed) into IPA.

    Raises:
        UnknownArpabetSymbolError: the symbol is not part of the table. This
            means the corpus is corrupt, not that the user typed something odd.
    """
    ipa = _ARPABET_TO_IPA.get(symbol.rstrip("0123456789"))
    if ipa is None:
        raise UnknownArpabetSymbolError(symbol)
    return ipa


class PhoneticSequence:
    """A dictionary pronunciation, iterable as IPA characters.

    Translation happens on demand and every `iter()` starts over, so the
    same sequence can be displayed and converted.
    """

    __slots__ = ("_symbols",)

    def __init__(self, symbols: tuple[str, ...]) -> None:
        self._symbols = symbols

    @property
    def symbols(self) -> tuple[str, ...]:
        """The raw ARPABET symbols, stress digits included."""
        return self._symbols

    def __iter__(self) -> Iterator[str]:
        for symbol in self._symbols:
            yield from arpabet_to_ipa(symbol)

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return "PhoneticSequence({!r})".format(" ".join(self._symbols))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PhoneticSequence):
            return NotImplemented
        return self._symbols == other._symbols


class Dictionary:
    """Immutable, case-insensitive word -> ARPABET symbols mapping."""

    def __init__(self, entries: dict[str, tuple[str, ...]]) -> None:
        self._entries = entries

    @classmethod
    def parse(cls, text: str) -> "Dictionary":
        """Build a dictionary from corpus text.

        Raises:
            DictionaryParseError: on the first non-comment line without the
                `WORD  SYMBOLS` shape. No partial dictionary is returned.
        """
        entries: dict[str, tuple[str, ...]] = {}
        for line_number, line in enumerate(text.splitlines(), start=1):
            if line.startswith(COMMENT_MARKER):
                continue
            word, sep, symbols = line.partition(FIELD_SEPARATOR)
            if not sep or not word:
                raise DictionaryParseError(line_number, line)
            entries[word.casefold()] = tuple(symbols.split())
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.casefold() in self._entries

    def look_up(self, word: str) -> Optional[PhoneticSequence]:
        """Return the pronunciation of `word`, or None if it is not listed."""
        symbols = self._entries.get(word.casefold())
        if symbols is None:
            return None
        return PhoneticSequence(symbols)
