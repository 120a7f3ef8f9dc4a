from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..errors import UnterminatedBracket
from .scanner import Scanner, U16_MAX, U32_MAX


class DRF_RANGE(BaseModel):
    model_config = ConfigDict(frozen=True)

    def canonical(self) -> str:
        raise NotImplementedError

    def __str__(self):
        return self.canonical()

    def __repr__(self):
        return f'<{type(self).__name__}: {self.canonical()!r}>'


class FULL_RANGE(DRF_RANGE):
    """ Literal ``[]`` or ``{}`` - the whole value, spelled out """
    mode: Literal['full'] = 'full'

    def canonical(self) -> str:
        return '[]'


class ARRAY_RANGE(DRF_RANGE):
    mode: Literal['array'] = 'array'
    start: int = Field(default=0, ge=0, le=U16_MAX)
    end: Optional[int] = Field(default=0, ge=0, le=U16_MAX)

    @property
    def is_default(self) -> bool:
        return self.start == 0 and self.end == 0

    def canonical(self) -> str:
        if self.is_default:
            return ''
        if self.end is None:
            return f'[{self.start}:]'
        if self.start == self.end:
            return f'[{self.start}]'
        return f'[{self.start}:{self.end}]'


class BYTE_RANGE(DRF_RANGE):
    mode: Literal['raw'] = 'raw'
    offset: int = Field(default=0, ge=0, le=U32_MAX)
    length: Optional[int] = Field(default=1, ge=0, le=U32_MAX)

    def canonical(self) -> str:
        if self.length is None:
            return f'{{{self.offset}:}}'
        if self.length == 1:
            return f'{{{self.offset}}}'
        return f'{{{self.offset}:{self.length}}}'


RANGE_TYPES = Annotated[Union[FULL_RANGE, ARRAY_RANGE, BYTE_RANGE], Field(discriminator='mode')]

# Produced when no range token is present; renders as nothing
DEFAULT_RANGE = ARRAY_RANGE(start=0, end=0)


def _at_digit(scanner: Scanner) -> bool:
    c = scanner.peek()
    return c is not None and c in '0123456789'


def _scan_bounds(scanner: Scanner, close: str, limit: int):
    """ ``<open>[low][:[high]]<close>`` with both bounds optional """
    start = scanner.mark()
    scanner.pos += 1
    low = scanner.uint(limit, 'range start') if _at_digit(scanner) else None
    colon = scanner.accept(':') is not None
    high = None
    if colon and _at_digit(scanner):
        high = scanner.uint(limit, 'range end')
    if scanner.accept(close) is None:
        scanner.fail(UnterminatedBracket, f'Range opened at {start} is not closed by {close!r}')
    return low, colon, high


def scan_range(scanner: Scanner) -> DRF_RANGE:
    c = scanner.peek()
    if c == '[':
        low, colon, high = _scan_bounds(scanner, ']', U16_MAX)
        if low is None and not colon:
            return FULL_RANGE()
        low = low or 0
        if not colon:
            high = low
        if low == 0 and high is None:
            return FULL_RANGE()
        return ARRAY_RANGE(start=low, end=high)
    elif c == '{':
        low, colon, high = _scan_bounds(scanner, '}', U32_MAX)
        if low is None and not colon:
            return FULL_RANGE()
        low = low or 0
        if not colon:
            high = 1
        if low == 0 and high is None:
            return FULL_RANGE()
        return BYTE_RANGE(offset=low, length=high)
    else:
        return DEFAULT_RANGE


def parse_range(raw_string: Optional[str]) -> DRF_RANGE:
    if raw_string is None or raw_string == '':
        return DEFAULT_RANGE
    scanner = Scanner(raw_string)
    rng = scan_range(scanner)
    scanner.expect_end()
    return rng
