from __future__ import annotations

"""Exception types shared by the domain, services and shells."""


class PhoneticsError(Exception):
    """Base class for every error raised by this project."""


class DictionaryParseError(PhoneticsError, ValueError):
    """A corpus line does not have the `WORD  SYMBOLS` shape."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__("Malformed dictionary entry on line {}: {!r}".format(line_number, line))


class UnknownArpabetSymbolError(PhoneticsError, KeyError):
    """The corpus contains a symbol missing from the ARPABET table."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(symbol)

    def __str__(self) -> str:
        return "Unknown ARPABET symbol: {!r}".format(self.symbol)


class HangulBuilderError(PhoneticsError, RuntimeError):
    """The builder was driven in a way its state machine does not allow."""


class ConfigurationError(PhoneticsError):
    pass


class WordLookupError(PhoneticsError):
    pass
