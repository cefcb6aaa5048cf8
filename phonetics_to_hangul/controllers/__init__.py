"""
Controller package exports.

This file exists to make controller modules discoverable to static analysis
(PyCharm inspections) and to provide a stable import surface.
"""

from .transcription_controller import TranscriptionUiController  # noqa: F401

__all__ = [
    "TranscriptionUiController",
]
