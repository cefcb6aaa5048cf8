from __future__ import annotations

"""Hangul syllable builder (domain layer).

Accepts consonant and vowel units one at a time and assembles them into
composed Hangul syllable blocks. The builder knows Hangul structure only;
deciding which unit a sound maps to is the caller's job.

A consonant that arrives right after a vowel cannot be placed yet: it may
close the current syllable or open the next one. It is held in
`buffered_consonant` until the next event decides its role.
"""

from typing import Final, Optional

from phonetics_to_hangul.domain.enums import Consonant, Position, Vowel
from phonetics_to_hangul.domain.errors import HangulBuilderError
from phonetics_to_hangul.domain.hangul_compose import (
    FILLER_INITIAL,
    FILLER_VOWEL,
    FINAL_JAMO,
    INITIAL_JAMO,
    MEDIAL_JAMO,
    normalize_jamo,
)


# (buffered, incoming) pairs whose buffered consonant opens a new syllable
# instead of closing the current one. Anything else resolves to a final.
_BUFFERED_ROLE: Final[dict[tuple[Consonant, Consonant], Position]] = {
    (Consonant.P, Consonant.L): Position.INITIAL_CONSONANT,
}


class HangulBuilder:
    """Position-tracking state machine producing Hangul block text.

    One instance serves one conversion; `finish()` is terminal.
    """

    def __init__(self) -> None:
        self._buf: list[str] = []
        self._pos = Position.INITIAL_CONSONANT
        self._buffered: Optional[Consonant] = None
        self._finished = False

    @property
    def position(self) -> Position:
        return self._pos

    @property
    def buffered_consonant(self) -> Optional[Consonant]:
        return self._buffered

    def is_start_of_word(self) -> bool:
        at_boundary = not self._buf or self._buf[-1] == " "
        return at_boundary and self._pos is Position.INITIAL_CONSONANT

    def advance_to(self, target: Position) -> None:
        """Step forward to `target`, filling skipped initial/vowel slots."""
        self._check_open()
        while self._pos is not target:
            if self._pos is Position.INITIAL_CONSONANT:
                self._buf.append(FILLER_INITIAL)
            elif self._pos is Position.VOWEL:
                self._buf.append(FILLER_VOWEL)
            self._pos = self._pos.advance()

    def push_consonant(self, cons: Consonant) -> None:
        self._check_open()
        if self._buffered is not None:
            role = _BUFFERED_ROLE.get((self._buffered, cons), Position.FINAL_CONSONANT)
            self._place_buffered(role)

        if self._pos is Position.VOWEL:
            self.advance_to(Position.SOME_CONSONANT)

        if self._pos is Position.SOME_CONSONANT:
            self._buffered = cons
            self._pos = Position.INITIAL_CONSONANT
            return

        self._emit_consonant(cons)

    def push_vowel(self, vowel: Vowel) -> None:
        self._check_open()
        if self._buffered is not None:
            self._place_buffered(Position.INITIAL_CONSONANT)

        self.advance_to(Position.VOWEL)
        self._buf.append(MEDIAL_JAMO[vowel])
        self._pos = self._pos.advance()

    def push_space(self) -> None:
        """Close the current syllable and append a literal space."""
        self._check_open()
        self._finish_syllable()
        self._buf.append(" ")

    def finish(self) -> str:
        """Close the last syllable and return the composed text.

        The builder cannot be used afterwards.
        """
        self._check_open()
        self._finish_syllable()
        self._finished = True
        return normalize_jamo("".join(self._buf))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_open(self) -> None:
        if self._finished:
            raise HangulBuilderError("HangulBuilder used after finish()")

    def _place_buffered(self, role: Position) -> None:
        cons = self._buffered
        self._buffered = None
        self._pos = role
        self._emit_consonant(cons)

    def _emit_consonant(self, cons: Consonant) -> None:
        if self._pos is Position.INITIAL_CONSONANT:
            jamo = INITIAL_JAMO[cons]
        elif self._pos is Position.FINAL_CONSONANT:
            jamo = FINAL_JAMO.get(cons)
            if jamo is None:
                raise HangulBuilderError("{} can't be in final consonant position".format(cons.name))
        else:
            raise HangulBuilderError("Cannot emit a consonant at position {}".format(self._pos.name))
        self._buf.append(jamo)
        self._pos = self._pos.advance()

    def _finish_syllable(self) -> None:
        if self._buffered is not None:
            self._place_buffered(Position.FINAL_CONSONANT)
        self.advance_to(Position.INITIAL_CONSONANT)
