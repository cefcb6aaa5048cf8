"""Turns a word's pronunciation into 한글 that sounds as close as possible
to the original word.

Usage:
    python main.py hello                 # bundled dictionary
    python main.py --ipa "hɛloʊ"         # raw IPA
    python main.py --online hello        # online dictionary (DICT_USER / DICT_PASS)
    python main.py --set-corpus cmudict-0.7b.txt   # remember a corpus
    python main.py                       # desktop window
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from phonetics_to_hangul.domain.errors import PhoneticsError
from phonetics_to_hangul.services.corpus import load_dictionary
from phonetics_to_hangul.services.settings_store import SettingsStore, get_credentials
from phonetics_to_hangul.services.transcriber import Transcriber, convert_words
from phonetics_to_hangul.services.word_lookup import LexicalaClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phonetics-to-hangul",
        description="Turns a word's pronunciation into 한글 with pronunciation as close as possible to the original word.",
    )
    parser.add_argument("words", nargs="*", help="The word(s) to replicate the pronunciation of in 한글.")
    parser.add_argument("-o", "--online", action="store_true", help="Switch to an online dictionary instead.")
    parser.add_argument(
        "-l",
        "--lang",
        default=None,
        help="The language of the word. Only used when the online dictionary is in use.",
    )
    parser.add_argument("--ipa", action="store_true", help="Treat the input as IPA and skip the dictionary.")
    parser.add_argument("--gui", action="store_true", help="Open the desktop window.")
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    parser.add_argument(
        "--set-corpus",
        metavar="PATH",
        default=None,
        help="Check the corpus at PATH and save it in the settings.",
    )
    parser.add_argument("--encoding", default=None, help="Encoding of the corpus given with --set-corpus.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output.")
    return parser


def run_offline(words: Sequence[str], settings: SettingsStore, out: TextIO) -> None:
    transcriber = Transcriber(load_dictionary(settings=settings))
    text = " ".join(words)
    split = text.split()
    if len(split) == 1 and split[0] not in transcriber.dictionary:
        raise PhoneticsError("The word is not in the dictionary.")

    result = transcriber.transcribe_words(text)
    print("Word: {}".format(text), file=out)
    print("Pronunciation: {}".format(result.pronunciation), file=out)
    print("한글: {}".format(result.hangul), file=out)


def run_ipa(words: Sequence[str], out: TextIO) -> None:
    pronunciation = " ".join(words)
    hangul = convert_words(pronunciation)
    print("Pronunciation: {}".format(pronunciation), file=out)
    print("한글: {}".format(hangul), file=out)


def run_online(words: Sequence[str], language: Optional[str], settings: SettingsStore, out: TextIO) -> None:
    config = settings.get_config()
    user, password = get_credentials()
    client = LexicalaClient(user, password, base_url=config.base_url, timeout=config.timeout_seconds)
    try:
        for word in words:
            try:
                found = client.lookup(word, language or config.language)
            except PhoneticsError as e:
                raise PhoneticsError("Failed looking up the word.") from e
            print("Word: {}".format(found.word), file=out)
            print("Pronunciation: {}".format(found.pronunciation), file=out)
            print("한글: {}".format(convert_words(found.pronunciation)), file=out)
    finally:
        client.close()


def run_set_corpus(path: str, encoding: Optional[str], settings: SettingsStore, out: TextIO) -> None:
    encoding = encoding or settings.get_config().corpus_encoding
    dictionary = load_dictionary(path, encoding)

    data = settings.load()
    data["corpus_path"] = str(Path(path).resolve())
    data["corpus_encoding"] = encoding
    settings.save(data)
    print("Saved corpus {} ({} entries) to {}".format(path, len(dictionary), settings.path), file=out)


def run_gui(settings: SettingsStore) -> int:
    from PyQt6.QtWidgets import QApplication

    from phonetics_to_hangul.ui.main_window import create_main_window

    app = QApplication.instance() or QApplication(sys.argv)
    window = create_main_window(dictionary=load_dictionary(settings=settings))
    window.show()
    return app.exec()


def _print_error_chain(error: BaseException, out: TextIO) -> None:
    current: Optional[BaseException] = error
    while current is not None:
        print(current, file=out)
        current = current.__cause__


def main(argv: Optional[Sequence[str]] = None, out: TextIO = sys.stdout) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    settings = SettingsStore(args.settings)

    try:
        if args.set_corpus:
            run_set_corpus(args.set_corpus, args.encoding, settings, out)
            return 0
        if args.gui or not args.words:
            return run_gui(settings)
        if args.ipa:
            run_ipa(args.words, out)
        elif args.online:
            run_online(args.words, args.lang, settings, out)
        else:
            run_offline(args.words, settings, out)
    except PhoneticsError as e:
        _print_error_chain(e, out)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
