from enum import Enum, auto
from typing import Optional


class ParseErrorKind(Enum):
    EXPECTED_SEPARATOR = auto()
    UNKNOWN_TOKEN = auto()
    MALFORMED_NUMBER = auto()
    UNTERMINATED_BRACKET = auto()
    TRAILING_INPUT = auto()


class DRFError(ValueError):
    pass


class DRFParseError(DRFError):
    """
    Raised when a DRF string (or fragment) does not follow the grammar.
    Carries the error kind, the offending position and the full input.
    """
    kind: ParseErrorKind = None

    def __init__(self, message: str, text: Optional[str] = None, position: Optional[int] = None):
        self.message = message
        self.text = text
        self.position = position
        if text is not None and position is not None:
            message = f'{message} at position {position} in {text!r}'
        super().__init__(message)

    @property
    def is_trailing(self) -> bool:
        """ True if a prefix of the input parsed and only leftover characters were rejected """
        return self.kind == ParseErrorKind.TRAILING_INPUT


class ExpectedSeparator(DRFParseError):
    kind = ParseErrorKind.EXPECTED_SEPARATOR


class UnknownToken(DRFParseError):
    kind = ParseErrorKind.UNKNOWN_TOKEN


class MalformedNumber(DRFParseError):
    kind = ParseErrorKind.MALFORMED_NUMBER


class UnterminatedBracket(DRFParseError):
    kind = ParseErrorKind.UNTERMINATED_BRACKET


class TrailingInput(DRFParseError):
    kind = ParseErrorKind.TRAILING_INPUT
