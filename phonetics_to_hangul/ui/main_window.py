"""Main window factory.

Public API:
- create_main_window(...): builds and returns the main window without starting the
  Qt event loop, enabling UI tests to instantiate the window headlessly.

The entrypoint responsibilities (QApplication creation and app.exec()) stay
in `main.py`.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtWidgets import QLabel, QLineEdit, QVBoxLayout, QWidget

from phonetics_to_hangul.controllers.transcription_controller import TranscriptionUiController
from phonetics_to_hangul.domain.arpabet import Dictionary
from phonetics_to_hangul.services.corpus import load_dictionary
from phonetics_to_hangul.services.transcriber import Transcriber

WINDOW_TITLE = "Phonetics to 한글"


def _field(parent: QWidget, layout: QVBoxLayout, caption: str, object_name: str, placeholder: str) -> QLineEdit:
    label = QLabel(caption, parent)
    edit = QLineEdit(parent)
    edit.setObjectName(object_name)
    edit.setPlaceholderText(placeholder)
    label.setBuddy(edit)
    layout.addWidget(label)
    layout.addWidget(edit)
    return edit


def create_main_window(*, dictionary: Optional[Dictionary] = None) -> QWidget:
    """Create and return the application's main window.

    This function must NOT call app.exec(). It assumes a QApplication exists.

    Args:
        dictionary: pronunciation dictionary to use; the configured corpus is
            loaded when omitted.
    """
    if dictionary is None:
        dictionary = load_dictionary()

    window = QWidget()
    window.setObjectName("MainWindow")
    window.setWindowTitle(WINDOW_TITLE)
    window.resize(300, 100)

    layout = QVBoxLayout(window)
    edit_word = _field(window, layout, "Word:", "editWord", "Example Text")
    edit_pronunciation = _field(window, layout, "Pronunciation (IPA):", "editPronunciation", "ɪɡzæmpʌl tɛkst")
    transcriber = Transcriber(dictionary)
    edit_hangul = _field(
        window, layout, "한글:", "editHangul", transcriber.transcribe_pronunciation(edit_pronunciation.placeholderText())
    )
    edit_hangul.setReadOnly(True)
    layout.addStretch(1)

    controller = TranscriptionUiController(
        transcriber=transcriber,
        edit_word=edit_word,
        edit_pronunciation=edit_pronunciation,
        edit_hangul=edit_hangul,
    )
    controller.wire()
    # Keep a strong ref; tests reach the controller through the window.
    window._controller = controller  # type: ignore[attr-defined]
    return window
