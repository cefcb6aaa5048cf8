from __future__ import annotations

import pytest

from phonetics_to_hangul.domain.enums import Consonant, Position, Vowel
from phonetics_to_hangul.domain.errors import HangulBuilderError
from phonetics_to_hangul.domain.hangul_builder import HangulBuilder
from phonetics_to_hangul.domain.hangul_compose import compose_lvt


def test_position_cycle() -> None:
    pos = Position.INITIAL_CONSONANT
    seen = []
    for _ in range(4):
        seen.append(pos)
        pos = pos.advance()
    assert pos is Position.INITIAL_CONSONANT
    assert seen == [
        Position.INITIAL_CONSONANT,
        Position.VOWEL,
        Position.SOME_CONSONANT,
        Position.FINAL_CONSONANT,
    ]


def test_consonant_vowel_syllable() -> None:
    b = HangulBuilder()
    b.push_consonant(Consonant.G)
    b.push_vowel(Vowel.A)
    assert b.finish() == "가"


def test_vowel_alone_gets_filler_initial() -> None:
    b = HangulBuilder()
    b.push_vowel(Vowel.A)
    assert b.finish() == "아"


def test_consonant_alone_gets_filler_vowel() -> None:
    b = HangulBuilder()
    b.push_consonant(Consonant.S)
    assert b.finish() == "스"


def test_consonant_after_vowel_is_buffered() -> None:
    b = HangulBuilder()
    b.push_vowel(Vowel.A)
    b.push_consonant(Consonant.N)
    assert b.buffered_consonant is Consonant.N
    assert b.position is Position.INITIAL_CONSONANT


def test_buffered_consonant_before_vowel_starts_next_syllable() -> None:
    b = HangulBuilder()
    b.push_vowel(Vowel.A)
    b.push_consonant(Consonant.N)
    b.push_vowel(Vowel.A)
    assert b.buffered_consonant is None
    assert b.finish() == "아나"


def test_buffered_consonant_at_end_becomes_final() -> None:
    b = HangulBuilder()
    b.push_vowel(Vowel.A)
    b.push_consonant(Consonant.N)
    assert b.finish() == "안"


def test_buffered_consonant_before_consonant_becomes_final() -> None:
    b = HangulBuilder()
    b.push_vowel(Vowel.A)
    b.push_consonant(Consonant.K)
    b.push_consonant(Consonant.L)
    b.push_vowel(Vowel.AE)
    assert b.finish() == compose_lvt("ㅇ", "ㅏ", "ㅋ") + compose_lvt("ㄹ", "ㅐ")


def test_p_before_l_starts_new_syllable() -> None:
    b = HangulBuilder()
    b.push_vowel(Vowel.A)
    b.push_consonant(Consonant.P)
    b.push_consonant(Consonant.L)
    b.push_vowel(Vowel.AE)
    assert b.finish() == "아" + compose_lvt("ㅍ", "ㅡ") + compose_lvt("ㄹ", "ㅐ")


def test_advance_to_inserts_fillers() -> None:
    b = HangulBuilder()
    b.advance_to(Position.FINAL_CONSONANT)
    b.push_consonant(Consonant.NG)
    assert b.position is Position.INITIAL_CONSONANT
    assert b.finish() == "응"


def test_advance_to_current_position_is_noop() -> None:
    b = HangulBuilder()
    b.advance_to(Position.INITIAL_CONSONANT)
    assert b.finish() == ""


def test_push_space_closes_syllable() -> None:
    b = HangulBuilder()
    b.push_vowel(Vowel.A)
    b.push_consonant(Consonant.N)
    b.push_space()
    b.push_consonant(Consonant.G)
    b.push_vowel(Vowel.A)
    assert b.finish() == "안 가"


def test_is_start_of_word() -> None:
    b = HangulBuilder()
    assert b.is_start_of_word()
    b.push_consonant(Consonant.G)
    assert not b.is_start_of_word()
    b.push_vowel(Vowel.A)
    b.push_consonant(Consonant.N)
    # buffered consonant: back at the initial slot, but mid-word
    assert b.position is Position.INITIAL_CONSONANT
    assert not b.is_start_of_word()
    b.push_space()
    assert b.is_start_of_word()


@pytest.mark.parametrize("tense", [Consonant.BB, Consonant.GG, Consonant.DD])
def test_tense_consonant_in_final_position_raises(tense: Consonant) -> None:
    b = HangulBuilder()
    b.push_vowel(Vowel.A)
    b.advance_to(Position.FINAL_CONSONANT)
    with pytest.raises(HangulBuilderError):
        b.push_consonant(tense)


@pytest.mark.parametrize("tense", [Consonant.BB, Consonant.GG, Consonant.DD])
def test_tense_consonant_in_initial_position(tense: Consonant) -> None:
    b = HangulBuilder()
    b.push_consonant(tense)
    b.push_vowel(Vowel.A)
    out = b.finish()
    assert len(out) == 1


def test_finish_is_terminal() -> None:
    b = HangulBuilder()
    b.push_vowel(Vowel.A)
    assert b.finish() == "아"
    with pytest.raises(HangulBuilderError):
        b.finish()
    with pytest.raises(HangulBuilderError):
        b.push_vowel(Vowel.A)
