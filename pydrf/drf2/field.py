from enum import Enum, auto
from typing import Optional

from ..errors import UnknownToken
from .property import DRF_PROPERTY
from .scanner import DOTTED_WORD_RE, Scanner


class DRF_FIELD(Enum):
    # reading/setting
    RAW = auto()
    PRIMARY = auto()
    SCALED = auto()
    # status
    ALL = auto()
    TEXT = auto()
    EXTENDED_TEXT = auto()
    ON = auto()
    READY = auto()
    REMOTE = auto()
    POSITIVE = auto()
    RAMP = auto()
    # analog/digital alarm blocks
    MIN = auto()
    MAX = auto()
    NOM = auto()
    TOL = auto()
    RAW_MIN = auto()
    RAW_MAX = auto()
    RAW_NOM = auto()
    RAW_TOL = auto()
    MASK = auto()
    ALARM_ENABLE = auto()
    ALARM_STATUS = auto()
    TRIES_NEEDED = auto()
    TRIES_NOW = auto()
    ALARM_FTD = auto()
    ABORT = auto()
    ABORT_INHIBIT = auto()
    FLAGS = auto()

    def canonical(self) -> str:
        return f'.{self.name}'


DEFAULT_FIELD_FOR_PROPERTY = {
    DRF_PROPERTY.READING: DRF_FIELD.SCALED,
    DRF_PROPERTY.SETTING: DRF_FIELD.SCALED,
    DRF_PROPERTY.STATUS: DRF_FIELD.ALL,
    DRF_PROPERTY.CONTROL: None,
    DRF_PROPERTY.ANALOG: DRF_FIELD.ALL,
    DRF_PROPERTY.DIGITAL: DRF_FIELD.ALL,
    DRF_PROPERTY.DESCRIPTION: None,
    DRF_PROPERTY.INDEX: None,
    DRF_PROPERTY.LONG_NAME: None,
    DRF_PROPERTY.ALARM_LIST_NAME: None
}

_F = DRF_FIELD
ALLOWED_FIELD_FOR_PROPERTY = {
    DRF_PROPERTY.READING: (_F.RAW, _F.PRIMARY, _F.SCALED),
    DRF_PROPERTY.SETTING: (_F.RAW, _F.PRIMARY, _F.SCALED),
    DRF_PROPERTY.STATUS: (_F.RAW, _F.ALL, _F.TEXT, _F.EXTENDED_TEXT, _F.ON, _F.READY,
                          _F.REMOTE, _F.POSITIVE, _F.RAMP),
    DRF_PROPERTY.CONTROL: (),
    DRF_PROPERTY.ANALOG: (_F.RAW, _F.ALL, _F.TEXT, _F.MIN, _F.MAX, _F.NOM, _F.TOL,
                          _F.RAW_MIN, _F.RAW_MAX, _F.RAW_NOM, _F.RAW_TOL,
                          _F.ALARM_ENABLE, _F.ALARM_STATUS, _F.TRIES_NEEDED, _F.TRIES_NOW,
                          _F.ALARM_FTD, _F.ABORT, _F.ABORT_INHIBIT, _F.FLAGS),
    DRF_PROPERTY.DIGITAL: (_F.RAW, _F.ALL, _F.TEXT, _F.NOM, _F.MASK,
                           _F.ALARM_ENABLE, _F.ALARM_STATUS, _F.TRIES_NEEDED, _F.TRIES_NOW,
                           _F.ALARM_FTD, _F.ABORT, _F.ABORT_INHIBIT, _F.FLAGS),
    DRF_PROPERTY.DESCRIPTION: (),
    DRF_PROPERTY.INDEX: (),
    DRF_PROPERTY.LONG_NAME: (),
    DRF_PROPERTY.ALARM_LIST_NAME: ()
}


def get_default_field(prop: DRF_PROPERTY) -> Optional[DRF_FIELD]:
    return DEFAULT_FIELD_FOR_PROPERTY[prop]


def is_field_allowed(prop: DRF_PROPERTY, field: Optional[DRF_FIELD]) -> bool:
    if field is None:
        return DEFAULT_FIELD_FOR_PROPERTY[prop] is None
    return field in ALLOWED_FIELD_FOR_PROPERTY[prop]


def _lookup(name: str, prop: DRF_PROPERTY) -> Optional[DRF_FIELD]:
    if not name.isascii():
        return None
    field = DRF_FIELD.__members__.get(name.upper())
    if field is not None and field in ALLOWED_FIELD_FOR_PROPERTY[prop]:
        return field
    return None


def scan_field(scanner: Scanner, prop: DRF_PROPERTY) -> Optional[DRF_FIELD]:
    """
    Try to consume ``.<FIELD>`` legal for ``prop``. Anything else stays
    unconsumed and ends up as trailing input.
    """
    mark = scanner.mark()
    match = scanner.match(DOTTED_WORD_RE)
    if match is not None:
        field = _lookup(match.group(1), prop)
        if field is not None:
            return field
    scanner.reset(mark)
    return None


def parse_field(raw_string: str, prop: DRF_PROPERTY) -> DRF_FIELD:
    assert raw_string is not None
    name = raw_string[1:] if raw_string.startswith('.') else raw_string
    field = _lookup(name, prop)
    if field is None:
        raise UnknownToken(f'Invalid field {raw_string!r} for {prop.name}', raw_string, 0)
    return field
