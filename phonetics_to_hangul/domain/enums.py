from __future__ import annotations

"""Closed sets used by the Hangul builder.

This module contains *no* Qt/UI dependencies and knows nothing about
phonetics; the members describe Hangul structure only.
"""

from enum import Enum, auto


class Consonant(Enum):
    """Consonant jamo usable by the builder.

    The three tense consonants (BB, GG, DD) only have an initial form.
    """

    B = auto()  # ㅂ
    J = auto()  # ㅈ
    D = auto()  # ㄷ
    G = auto()  # ㄱ
    S = auto()  # ㅅ
    M = auto()  # ㅁ
    N = auto()  # ㄴ
    NG = auto()  # ㅇ
    L = auto()  # ㄹ
    H = auto()  # ㅎ
    K = auto()  # ㅋ
    T = auto()  # ㅌ
    CH = auto()  # ㅊ
    P = auto()  # ㅍ
    BB = auto()  # ㅃ
    GG = auto()  # ㄲ
    DD = auto()  # ㄸ


class Vowel(Enum):
    AE = auto()  # ㅐ
    E = auto()  # ㅔ
    O = auto()  # ㅗ
    EO = auto()  # ㅓ
    A = auto()  # ㅏ
    I = auto()  # ㅣ
    U = auto()  # ㅜ
    EU = auto()  # ㅡ
    WI = auto()  # ㅟ
    WAE = auto()  # ㅙ
    WA = auto()  # ㅘ
    WO = auto()  # ㅝ
    WE = auto()  # ㅞ
    YAE = auto()  # ㅒ
    YA = auto()  # ㅑ
    YEO = auto()  # ㅕ
    YE = auto()  # ㅖ
    YO = auto()  # ㅛ
    YU = auto()  # ㅠ


class Position(Enum):
    """Slot of the syllable template the builder fills next.

    SOME_CONSONANT is a decision point, not a slot: a consonant arriving
    there may end up as either a final or the next initial.
    """

    INITIAL_CONSONANT = auto()
    VOWEL = auto()
    SOME_CONSONANT = auto()
    FINAL_CONSONANT = auto()

    def advance(self) -> "Position":
        return _NEXT_POSITION[self]


_NEXT_POSITION: dict[Position, Position] = {
    Position.INITIAL_CONSONANT: Position.VOWEL,
    Position.VOWEL: Position.SOME_CONSONANT,
    Position.SOME_CONSONANT: Position.FINAL_CONSONANT,
    Position.FINAL_CONSONANT: Position.INITIAL_CONSONANT,
}
