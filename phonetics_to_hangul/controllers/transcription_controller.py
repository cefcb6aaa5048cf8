from __future__ import annotations

import logging
from dataclasses import dataclass

from PyQt6.QtWidgets import QLineEdit

from phonetics_to_hangul.domain.errors import PhoneticsError
from phonetics_to_hangul.services.transcriber import Transcriber

logger = logging.getLogger(__name__)


@dataclass
class TranscriptionUiController:
    """Owns the word / pronunciation / Hangul field wiring.

    Responsibilities:
    - word edited: fill pronunciation and Hangul from the dictionary
    - pronunciation edited: clear the word, convert the typed IPA
    - conversion errors (e.g. a corrupt corpus entry) are shown in the
      Hangul field

    Only `textEdited` is used so programmatic updates never feed back.
    """

    transcriber: Transcriber
    edit_word: QLineEdit
    edit_pronunciation: QLineEdit
    edit_hangul: QLineEdit

    def wire(self) -> None:
        self.edit_word.textEdited.connect(self._on_word_edited)
        self.edit_pronunciation.textEdited.connect(self._on_pronunciation_edited)

    def _show_error(self, error: PhoneticsError) -> None:
        self.edit_hangul.setText("Error: {}".format(error))

    def _on_word_edited(self, text: str) -> None:
        try:
            result = self.transcriber.transcribe_words(text)
        except PhoneticsError as e:
            logger.error("Transcribing %r failed: %s", text, e)
            self.edit_pronunciation.clear()
            self._show_error(e)
            return
        except Exception:
            logger.exception("Transcribing %r failed", text)
            return
        self.edit_pronunciation.setText(result.pronunciation)
        self.edit_hangul.setText(result.hangul)

    def _on_pronunciation_edited(self, text: str) -> None:
        self.edit_word.clear()
        try:
            hangul = self.transcriber.transcribe_pronunciation(text)
        except PhoneticsError as e:
            logger.error("Converting %r failed: %s", text, e)
            self._show_error(e)
            return
        except Exception:
            logger.exception("Converting %r failed", text)
            return
        self.edit_hangul.setText(hangul)
