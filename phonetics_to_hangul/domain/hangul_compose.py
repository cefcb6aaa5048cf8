from __future__ import annotations

"""Hangul composition helpers (domain layer).

This module contains *no* Qt/UI dependencies.

It centralises:
- Hangul Jamo ordering constants (compatibility jamo)
- The conjoining jamo emitted by the builder for every Consonant/Vowel
- Pure functions for composing and checking syllable blocks

The builder works on *conjoining* jamo (U+1100 block) because Unicode
NFC composes an initial + vowel (+ final) run of those into a single
syllable block. Compatibility jamo (U+3130 block) are only used as
readable table keys.
"""

import unicodedata
from typing import Final

from phonetics_to_hangul.domain.enums import Consonant, Vowel


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)

_S_BASE: Final[int] = 0xAC00
_S_LAST: Final[int] = 0xD7A3
_V_COUNT: Final[int] = 21
_T_COUNT: Final[int] = 28

_L_BASE: Final[int] = 0x1100
_V_BASE: Final[int] = 0x1161
_T_BASE: Final[int] = 0x11A7


# -----------------------------------------------------------------------------
# Builder units -> compatibility jamo
# -----------------------------------------------------------------------------

CONSONANT_JAMO: Final[dict[Consonant, str]] = {
    Consonant.B: "ㅂ",
    Consonant.J: "ㅈ",
    Consonant.D: "ㄷ",
    Consonant.G: "ㄱ",
    Consonant.S: "ㅅ",
    Consonant.M: "ㅁ",
    Consonant.N: "ㄴ",
    Consonant.NG: "ㅇ",
    Consonant.L: "ㄹ",
    Consonant.H: "ㅎ",
    Consonant.K: "ㅋ",
    Consonant.T: "ㅌ",
    Consonant.CH: "ㅊ",
    Consonant.P: "ㅍ",
    Consonant.BB: "ㅃ",
    Consonant.GG: "ㄲ",
    Consonant.DD: "ㄸ",
}

VOWEL_JAMO: Final[dict[Vowel, str]] = {
    Vowel.AE: "ㅐ",
    Vowel.E: "ㅔ",
    Vowel.O: "ㅗ",
    Vowel.EO: "ㅓ",
    Vowel.A: "ㅏ",
    Vowel.I: "ㅣ",
    Vowel.U: "ㅜ",
    Vowel.EU: "ㅡ",
    Vowel.WI: "ㅟ",
    Vowel.WAE: "ㅙ",
    Vowel.WA: "ㅘ",
    Vowel.WO: "ㅝ",
    Vowel.WE: "ㅞ",
    Vowel.YAE: "ㅒ",
    Vowel.YA: "ㅑ",
    Vowel.YEO: "ㅕ",
    Vowel.YE: "ㅖ",
    Vowel.YO: "ㅛ",
    Vowel.YU: "ㅠ",
}

# Tense consonants have no final form in the builder's inventory.
INITIAL_ONLY: Final[frozenset[Consonant]] = frozenset({Consonant.BB, Consonant.GG, Consonant.DD})


def _conjoining_initial(compat: str) -> str:
    return chr(_L_BASE + CHOSEONG.index(compat))


def _conjoining_vowel(compat: str) -> str:
    return chr(_V_BASE + JUNGSEONG.index(compat))


def _conjoining_final(compat: str) -> str:
    return chr(_T_BASE + JONGSEONG.index(compat))


INITIAL_JAMO: Final[dict[Consonant, str]] = {
    c: _conjoining_initial(j) for c, j in CONSONANT_JAMO.items()
}

FINAL_JAMO: Final[dict[Consonant, str]] = {
    c: _conjoining_final(j) for c, j in CONSONANT_JAMO.items() if c not in INITIAL_ONLY
}

MEDIAL_JAMO: Final[dict[Vowel, str]] = {
    v: _conjoining_vowel(j) for v, j in VOWEL_JAMO.items()
}

# Neutral placeholders: silent ㅇ for an empty onset, ㅡ for an empty nucleus.
FILLER_INITIAL: Final[str] = _conjoining_initial("ㅇ")
FILLER_VOWEL: Final[str] = _conjoining_vowel("ㅡ")


# -----------------------------------------------------------------------------
# Domain logic
# -----------------------------------------------------------------------------

def normalize_jamo(text: str) -> str:
    """Compose runs of conjoining jamo into syllable blocks (Unicode NFC)."""
    return unicodedata.normalize("NFC", text)


def compose_lvt(lead: str, vowel: str, tail: str = "") -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간").

    Raises:
        ValueError: if any part is not valid jamo for its slot.

    Notes:
        This uses the Unicode Hangul Syllables algorithm:
        SBase + (LIndex * VCount + VIndex) * TCount + TIndex
    """
    try:
        li = CHOSEONG.index(lead)
        vi = JUNGSEONG.index(vowel)
        ti = JONGSEONG.index(tail)
    except ValueError as e:
        raise ValueError("Invalid jamo for compose_lvt: lead=%r vowel=%r tail=%r" % (lead, vowel, tail)) from e
    return chr(_S_BASE + (li * _V_COUNT + vi) * _T_COUNT + ti)


def is_syllable_block(ch: str) -> bool:
    return len(ch) == 1 and _S_BASE <= ord(ch) <= _S_LAST


def is_well_formed(text: str) -> bool:
    """True iff `text` holds only composed syllable blocks and literal spaces."""
    return all(ch == " " or is_syllable_block(ch) for ch in text)
