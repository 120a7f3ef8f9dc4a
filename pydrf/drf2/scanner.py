import re
from typing import Optional, Type

from ..errors import DRFParseError, MalformedNumber, TrailingInput, UnknownToken

U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF

DIGITS_RE = re.compile('[0-9]+')
HEX_RE = re.compile('[0-9A-Fa-f]+')
WORD_RE = re.compile('[A-Za-z0-9_]+')
DOTTED_WORD_RE = re.compile('\\.([A-Za-z0-9_]+)')


class Scanner:
    """
    Cursor over a DRF string. Each sub-parser advances ``pos`` past what it
    consumes; optional tokens are tried with ``mark``/``reset``.
    """

    def __init__(self, text: str, pos: int = 0):
        assert text is not None
        self.text = text
        self.pos = pos

    def __repr__(self):
        return f'<Scanner {self.text[:self.pos]!r} | {self.text[self.pos:]!r}>'

    @property
    def done(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def rest(self) -> str:
        return self.text[self.pos:]

    def peek(self) -> Optional[str]:
        if self.done:
            return None
        return self.text[self.pos]

    def mark(self) -> int:
        return self.pos

    def reset(self, mark: int):
        self.pos = mark

    def accept(self, chars: str) -> Optional[str]:
        """ Consume the next character if it is one of ``chars`` (case-insensitive) """
        c = self.peek()
        if c is not None and c in chars.upper() + chars.lower():
            self.pos += 1
            return c
        return None

    def match(self, pattern: re.Pattern) -> Optional[re.Match]:
        m = pattern.match(self.text, self.pos)
        if m is not None:
            self.pos = m.end()
        return m

    def fail(self, error: Type[DRFParseError], message: str, pos: Optional[int] = None):
        raise error(message, self.text, self.pos if pos is None else pos)

    def expect(self, chars: str, what: str) -> str:
        c = self.accept(chars)
        if c is None:
            found = self.peek()
            self.fail(UnknownToken, f'Expected {what}, found {"end of input" if found is None else repr(found)}')
        return c

    def expect_end(self):
        if not self.done:
            self.fail(TrailingInput, f'Unexpected trailing input {self.rest!r}')

    def uint(self, limit: int, what: str) -> int:
        """ Unsigned decimal literal that must fit in ``limit`` """
        start = self.pos
        m = self.match(DIGITS_RE)
        if m is None:
            self.fail(MalformedNumber, f'Expected {what}')
        value = int(m.group())
        if value > limit:
            self.fail(MalformedNumber, f'{what} {value} does not fit in {limit.bit_length()} bits', start)
        return value

    def hex(self, limit: int, what: str) -> int:
        start = self.pos
        m = self.match(HEX_RE)
        if m is None:
            self.fail(MalformedNumber, f'Expected hexadecimal {what}')
        value = int(m.group(), 16)
        if value > limit:
            self.fail(MalformedNumber, f'{what} {m.group()} does not fit in {limit.bit_length()} bits', start)
        return value
