from __future__ import annotations

from dataclasses import dataclass

from phonetics_to_hangul.domain.arpabet import Dictionary
from phonetics_to_hangul.domain.ipa_to_hangul import convert

NOT_FOUND = "?"


@dataclass(frozen=True)
class Transcription:
    pronunciation: str
    hangul: str


def convert_words(text: str) -> str:
    """Convert whitespace-separated IPA words one at a time."""
    return " ".join(convert(chunk) for chunk in text.split())


class Transcriber:
    """Word-by-word transcription shared by the CLI and the window.

    Words are converted independently and joined with single spaces.
    Words missing from the dictionary show up as `?` in both outputs.
    """

    def __init__(self, dictionary: Dictionary) -> None:
        self._dictionary = dictionary

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    def transcribe_words(self, text: str) -> Transcription:
        pronunciations: list[str] = []
        hanguls: list[str] = []
        for word in text.split():
            sequence = self._dictionary.look_up(word)
            if sequence is None:
                pronunciations.append(NOT_FOUND)
                hanguls.append(NOT_FOUND)
                continue
            pronunciations.append(str(sequence))
            hanguls.append(convert(sequence))
        return Transcription(pronunciation=" ".join(pronunciations), hangul=" ".join(hanguls))

    def transcribe_pronunciation(self, text: str) -> str:
        return convert_words(text)
