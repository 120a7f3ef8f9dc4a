import re
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..errors import MalformedNumber, UnknownToken
from .scanner import Scanner, U16_MAX, U32_MAX, WORD_RE

DELAY_UNITS = {
    'S': 1_000_000,
    'M': 1_000,
    'U': 1,
    'K': 10,
}
BOOL_WORDS = {'T': True, 'TRUE': True, 'F': False, 'FALSE': False}
# Longest symbols first so '<=' wins over '<'
STATE_OP_RE = re.compile('!=|<=|>=|=|<|>|\\*')


class CLOCK_TYPE(Enum):
    HARDWARE = 'H'
    SOFTWARE = 'S'
    EITHER = 'E'


class STATE_OP(Enum):
    EQ = '='
    NEQ = '!='
    GT = '>'
    LT = '<'
    LEQ = '<='
    GEQ = '>='
    ALL = '*'


def canonical_delay(delay: int) -> str:
    if delay == 0:
        return '0'
    elif delay % 1_000_000 == 0:
        return f'{delay // 1_000_000}S'
    elif delay % 1_000 == 0:
        return f'{delay // 1_000}'
    else:
        return f'{delay}U'


class DRF_EVENT(BaseModel):
    model_config = ConfigDict(frozen=True)

    def canonical(self) -> str:
        raise NotImplementedError

    def __str__(self):
        return self.canonical()

    def __repr__(self):
        return f'<{type(self).__name__}: {self.canonical()!r}>'


class DefaultEvent(DRF_EVENT):
    mode: Literal['U'] = 'U'

    def canonical(self) -> str:
        return ''


class NeverEvent(DRF_EVENT):
    mode: Literal['N'] = 'N'

    def canonical(self) -> str:
        return '@N'


class ImmediateEvent(DRF_EVENT):
    mode: Literal['I'] = 'I'

    def canonical(self) -> str:
        return '@I'


class PeriodicEvent(DRF_EVENT):
    mode: Literal['P'] = 'P'
    period_us: int = Field(ge=0, le=U32_MAX)
    immediate: bool = True
    skip_if_late: bool = False

    def canonical(self) -> str:
        letter = 'Q' if self.skip_if_late else 'P'
        return f'@{letter},{canonical_delay(self.period_us)},{"TRUE" if self.immediate else "FALSE"}'


class ClockEvent(DRF_EVENT):
    mode: Literal['E'] = 'E'
    event: int = Field(ge=0, le=U16_MAX)
    clock_type: CLOCK_TYPE = CLOCK_TYPE.EITHER
    delay_us: int = Field(default=0, ge=0, le=U32_MAX)

    def canonical(self) -> str:
        return f'@E,{self.event:X},{self.clock_type.value},{canonical_delay(self.delay_us)}'


class StateEvent(DRF_EVENT):
    mode: Literal['S'] = 'S'
    device_id: int = Field(ge=0, le=U32_MAX)
    value: int = Field(ge=0, le=U16_MAX)
    delay_us: int = Field(default=0, ge=0, le=U32_MAX)
    op: STATE_OP = STATE_OP.EQ

    def canonical(self) -> str:
        return f'@S,{self.device_id},{self.value},{canonical_delay(self.delay_us)},{self.op.value}'


EVENT_TYPES = Annotated[Union[DefaultEvent, NeverEvent, ImmediateEvent, PeriodicEvent,
                              ClockEvent, StateEvent], Field(discriminator='mode')]

DEFAULT_EVENT = DefaultEvent()


def scan_delay(scanner: Scanner) -> int:
    """
    Delay or period literal in microseconds: a number with an optional unit
    letter. S=seconds, M=milliseconds (the default), U=microseconds,
    K=10us clock ticks, H=frequency in Hz.
    """
    start = scanner.mark()
    value = scanner.uint(U32_MAX, 'delay')
    unit = scanner.peek()
    if unit is not None and unit.isascii() and unit.isalpha():
        unit = unit.upper()
        if unit != 'H' and unit not in DELAY_UNITS:
            scanner.fail(UnknownToken, f'Unknown delay unit {unit!r}')
        scanner.pos += 1
    else:
        unit = 'M'
    if unit == 'H':
        if value == 0:
            scanner.fail(MalformedNumber, 'Frequency must be non-zero', start)
        delay = 1_000_000 // value
        if delay == 0:
            scanner.fail(MalformedNumber, f'Frequency of {value}Hz is above 1MHz', start)
    else:
        delay = value * DELAY_UNITS[unit]
    if delay > U32_MAX:
        scanner.fail(MalformedNumber, f'Delay of {delay}us is out of range', start)
    return delay


def _scan_bool(scanner: Scanner) -> bool:
    start = scanner.mark()
    word = scanner.match(WORD_RE)
    if word is None or word.group().upper() not in BOOL_WORDS:
        scanner.fail(UnknownToken, 'Expected TRUE or FALSE', start)
    return BOOL_WORDS[word.group().upper()]


def _scan_periodic(scanner: Scanner, letter: str) -> PeriodicEvent:
    scanner.expect(',', "',' before period")
    period = scan_delay(scanner)
    immediate = True
    if scanner.accept(','):
        immediate = _scan_bool(scanner)
    return PeriodicEvent(period_us=period, immediate=immediate, skip_if_late=letter == 'Q')


def _scan_clock(scanner: Scanner) -> ClockEvent:
    scanner.expect(',', "',' before clock event number")
    event = scanner.hex(U16_MAX, 'clock event')
    clock_type = CLOCK_TYPE.EITHER
    delay = 0
    if scanner.accept(','):
        clock_type = CLOCK_TYPE(scanner.expect('HSE', 'clock type H, S or E').upper())
        if scanner.accept(','):
            delay = scan_delay(scanner)
    return ClockEvent(event=event, clock_type=clock_type, delay_us=delay)


def _scan_state(scanner: Scanner) -> StateEvent:
    scanner.expect(',', "',' before state device")
    device_id = scanner.uint(U32_MAX, 'state device')
    scanner.expect(',', "',' before state value")
    value = scanner.uint(U16_MAX, 'state value')
    scanner.expect(',', "',' before state delay")
    delay = scan_delay(scanner)
    scanner.expect(',', "',' before state comparison")
    op = scanner.match(STATE_OP_RE)
    if op is None:
        scanner.fail(UnknownToken, 'Expected comparison (=, !=, >, <, <=, >=, *)')
    return StateEvent(device_id=device_id, value=value, delay_us=delay, op=STATE_OP(op.group()))


def scan_event(scanner: Scanner) -> DRF_EVENT:
    if scanner.accept('@') is None:
        return DEFAULT_EVENT
    char = scanner.expect('UNIPQES', 'event type').upper()
    if char == 'U':
        return DEFAULT_EVENT
    elif char == 'N':
        return NeverEvent()
    elif char == 'I':
        return ImmediateEvent()
    elif char in ['P', 'Q']:
        return _scan_periodic(scanner, char)
    elif char == 'E':
        return _scan_clock(scanner)
    else:
        return _scan_state(scanner)


def parse_event(parse_str: Optional[str]) -> DRF_EVENT:
    """ Parse an event with or without the leading '@' """
    if parse_str is None or parse_str == '':
        return DEFAULT_EVENT
    text = parse_str if parse_str.startswith('@') else f'@{parse_str}'
    scanner = Scanner(text)
    event = scan_event(scanner)
    scanner.expect_end()
    return event
