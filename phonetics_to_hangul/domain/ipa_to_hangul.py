from __future__ import annotations

"""Phonetic (IPA) text -> Hangul.

`convert()` walks the phonetic characters once, peeking at most one
symbol ahead, and drives a fresh `HangulBuilder`. The rules are kept as
tables keyed by the IPA character so the romanization choices can be read
(and tested) without touching Unicode composition.

Whitespace is skipped, and both whitespace and the boundary marker `|`
end the lookahead: a symbol never fuses with, or is kept alive by,
something in the next word.
"""

import logging
from itertools import chain
from typing import Callable, Final, Iterable, Iterator, Optional

from phonetics_to_hangul.domain.enums import Consonant, Position, Vowel
from phonetics_to_hangul.domain.hangul_builder import HangulBuilder

logger = logging.getLogger(__name__)


BOUNDARY_MARKER: Final[str] = "|"

# Stress and length marks carry nothing Hangul can show.
IGNORED_MARKS: Final[frozenset[str]] = frozenset({"ˈ", "ˌ", "ː", "'"})


# -----------------------------------------------------------------------------
# Rule tables
# -----------------------------------------------------------------------------

_VOWELS: Final[dict[str, Vowel]] = {
    "ʌ": Vowel.EO,
    "ɔ": Vowel.EO,
    "ɒ": Vowel.EO,
    "ɑ": Vowel.EO,
    "ə": Vowel.EU,
    "ɜ": Vowel.EU,
    "ɝ": Vowel.EU,
    "ɚ": Vowel.EU,
    "a": Vowel.A,
    "ɐ": Vowel.A,
    "ʊ": Vowel.U,
    "u": Vowel.U,
    "o": Vowel.O,
    "e": Vowel.E,
    "ɛ": Vowel.AE,
    "æ": Vowel.AE,
}

_PLAIN_CONSONANTS: Final[dict[str, Consonant]] = {
    "n": Consonant.N,
    "m": Consonant.M,
    "l": Consonant.L,
    "h": Consonant.H,
    "f": Consonant.P,
    "ð": Consonant.D,
    "θ": Consonant.D,
    "ʧ": Consonant.CH,
    "ʤ": Consonant.J,
}

# symbol -> (at the start of a word, anywhere else)
_STOPS: Final[dict[str, tuple[Consonant, Consonant]]] = {
    "p": (Consonant.BB, Consonant.P),
    "t": (Consonant.DD, Consonant.T),
    "k": (Consonant.GG, Consonant.K),
    "b": (Consonant.B, Consonant.B),
    "d": (Consonant.D, Consonant.D),
    "g": (Consonant.G, Consonant.G),
    "ɡ": (Consonant.G, Consonant.G),
}

# stop + following fricative read as one affricate
_AFFRICATES: Final[dict[tuple[str, str], Consonant]] = {
    ("t", "ʃ"): Consonant.CH,
    ("d", "ʒ"): Consonant.J,
}

_Y_GLIDES: Final[frozenset[str]] = frozenset({"j", "ɪ", "y", "i"})

_Y_FUSION: Final[dict[str, Vowel]] = {
    "ɛ": Vowel.YAE,
    "æ": Vowel.YAE,
    "a": Vowel.YA,
    "ɐ": Vowel.YA,
    "ʌ": Vowel.YEO,
    "ɔ": Vowel.YEO,
    "ɒ": Vowel.YEO,
    "ɑ": Vowel.YEO,
    "e": Vowel.YE,
    "o": Vowel.YO,
    "ʊ": Vowel.YU,
    "u": Vowel.YU,
}

_W_GLIDES: Final[frozenset[str]] = frozenset({"w", "v"})

_W_FUSION: Final[dict[str, Vowel]] = {
    **dict.fromkeys(_Y_GLIDES, Vowel.WI),
    "ɛ": Vowel.WAE,
    "æ": Vowel.WAE,
    "a": Vowel.WA,
    "ɐ": Vowel.WA,
    "o": Vowel.WO,
    "ʌ": Vowel.WO,
    "ɔ": Vowel.WO,
    "ɒ": Vowel.WO,
    "ɑ": Vowel.WO,
    "e": Vowel.WE,
}

# fricative -> whether it gets a trailing ㅣ unless an i-like sound follows
_SIBILANTS: Final[dict[str, bool]] = {
    "s": False,
    "z": False,
    "ʃ": True,
    "ʒ": True,
}

_RHOTICS: Final[frozenset[str]] = frozenset({"r", "ɹ"})


# -----------------------------------------------------------------------------
# Lookahead
# -----------------------------------------------------------------------------

_END = object()


class _Cursor:
    """Character iterator with a one-symbol, word-bounded peek."""

    def __init__(self, symbols: Iterable[str]) -> None:
        # Accept plain strings as well as iterables of (multi-char) strings.
        self._it: Iterator[str] = chain.from_iterable(symbols)
        self._peeked: object = None

    def __iter__(self) -> "_Cursor":
        return self

    def __next__(self) -> str:
        if self._peeked is not None:
            nxt, self._peeked = self._peeked, None
            if nxt is _END:
                raise StopIteration
            return nxt  # type: ignore[return-value]
        return next(self._it)

    def peek(self) -> Optional[str]:
        """Next symbol of the current word, or None at a word/stream end."""
        if self._peeked is None:
            self._peeked = next(self._it, _END)
        nxt = self._peeked
        if nxt is _END or nxt == BOUNDARY_MARKER or nxt.isspace():  # type: ignore[union-attr]
            return None
        return nxt  # type: ignore[return-value]

    def take(self) -> None:
        """Consume the symbol returned by the last `peek()`."""
        self._peeked = None


# -----------------------------------------------------------------------------
# Rules
# -----------------------------------------------------------------------------

Rule = Callable[[HangulBuilder, _Cursor, str], None]


def _vowel(builder: HangulBuilder, cursor: _Cursor, symbol: str) -> None:
    builder.push_vowel(_VOWELS[symbol])


def _plain_consonant(builder: HangulBuilder, cursor: _Cursor, symbol: str) -> None:
    builder.push_consonant(_PLAIN_CONSONANTS[symbol])


def _stop(builder: HangulBuilder, cursor: _Cursor, symbol: str) -> None:
    follower = cursor.peek()
    affricate = _AFFRICATES.get((symbol, follower))
    if affricate is not None:
        cursor.take()
        builder.push_consonant(affricate)
        return
    initial, elsewhere = _STOPS[symbol]
    builder.push_consonant(initial if builder.is_start_of_word() else elsewhere)


def _y_glide(builder: HangulBuilder, cursor: _Cursor, symbol: str) -> None:
    follower = cursor.peek()
    fused = _Y_FUSION.get(follower)
    if fused is None:
        builder.push_vowel(Vowel.I)
        return
    cursor.take()
    builder.push_vowel(fused)


def _w_glide(builder: HangulBuilder, cursor: _Cursor, symbol: str) -> None:
    follower = cursor.peek()
    if follower is None:
        builder.push_consonant(Consonant.B)
        return
    fused = _W_FUSION.get(follower)
    if fused is None:
        builder.push_vowel(Vowel.U)
        return
    cursor.take()
    builder.push_vowel(fused)


def _sibilant(builder: HangulBuilder, cursor: _Cursor, symbol: str) -> None:
    # Start a fresh syllable so ㅅ never lands in a pending final slot.
    builder.advance_to(Position.INITIAL_CONSONANT)
    builder.push_consonant(Consonant.S)
    if _SIBILANTS[symbol] and cursor.peek() not in _Y_GLIDES:
        builder.push_vowel(Vowel.I)


def _velar_nasal(builder: HangulBuilder, cursor: _Cursor, symbol: str) -> None:
    builder.advance_to(Position.FINAL_CONSONANT)
    builder.push_consonant(Consonant.NG)


def _ts(builder: HangulBuilder, cursor: _Cursor, symbol: str) -> None:
    builder.advance_to(Position.FINAL_CONSONANT)
    builder.push_consonant(Consonant.T)
    builder.push_consonant(Consonant.S)


def _rhotic(builder: HangulBuilder, cursor: _Cursor, symbol: str) -> None:
    # A trailing r has no well-formed rendering; drop it.
    if cursor.peek() is not None:
        builder.push_consonant(Consonant.L)


def _boundary(builder: HangulBuilder, cursor: _Cursor, symbol: str) -> None:
    builder.push_space()


def _ignore(builder: HangulBuilder, cursor: _Cursor, symbol: str) -> None:
    pass


RULES: Final[dict[str, Rule]] = {
    **dict.fromkeys(_VOWELS, _vowel),
    **dict.fromkeys(_PLAIN_CONSONANTS, _plain_consonant),
    **dict.fromkeys(_STOPS, _stop),
    **dict.fromkeys(_Y_GLIDES, _y_glide),
    **dict.fromkeys(_W_GLIDES, _w_glide),
    **dict.fromkeys(_SIBILANTS, _sibilant),
    **dict.fromkeys(_RHOTICS, _rhotic),
    "ŋ": _velar_nasal,
    "ʦ": _ts,
    BOUNDARY_MARKER: _boundary,
    **dict.fromkeys(IGNORED_MARKS, _ignore),
}


def convert(phonetics: Iterable[str]) -> str:
    """Render phonetic characters as Hangul.

    Args:
        phonetics: raw IPA text, a `PhoneticSequence`, or any iterable of
            IPA strings.

    Returns:
        Composed Hangul syllable blocks; `|` becomes a single space.

    Unknown symbols are logged and skipped.
    """
    builder = HangulBuilder()
    cursor = _Cursor(phonetics)
    for symbol in cursor:
        if symbol.isspace():
            continue
        rule = RULES.get(symbol)
        if rule is None:
            logger.warning("Unknown phonetic symbol %r, skipping", symbol)
            continue
        rule(builder, cursor, symbol)
    return builder.finish()
