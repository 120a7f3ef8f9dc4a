from enum import Enum
from typing import Optional

from ..errors import UnknownToken
from .scanner import DOTTED_WORD_RE, Scanner


class DRF_PROPERTY(Enum):
    READING = ':'
    SETTING = '_'
    STATUS = '|'
    CONTROL = '&'
    ANALOG = '@'
    DIGITAL = '$'
    DESCRIPTION = '~'
    INDEX = '^'
    LONG_NAME = '#'
    ALARM_LIST_NAME = '!'

    def canonical(self) -> str:
        return f'.{self.name}'

    @property
    def qualifier(self) -> str:
        return self.value


DRF_PROPERTY_NAMES = [el.name for el in DRF_PROPERTY]

# Only these separators are accepted by the device scanner
DEFAULT_PROPERTY_FOR_SEPARATOR = {
    ':': DRF_PROPERTY.READING,
    '|': DRF_PROPERTY.STATUS,
}


def get_default_property(separator: str) -> Optional[DRF_PROPERTY]:
    return DEFAULT_PROPERTY_FOR_SEPARATOR.get(separator)


def scan_property(scanner: Scanner) -> Optional[DRF_PROPERTY]:
    """
    Try to consume ``.<PROPERTY>`` at the cursor. A word that is not a
    property name is left in place for the field scanner.
    """
    mark = scanner.mark()
    match = scanner.match(DOTTED_WORD_RE)
    if match is not None:
        name = match.group(1).upper()
        if name in DRF_PROPERTY_NAMES:
            return DRF_PROPERTY[name]
    scanner.reset(mark)
    return None


def parse_property(raw_string: str) -> DRF_PROPERTY:
    assert raw_string is not None
    name = raw_string[1:] if raw_string.startswith('.') else raw_string
    if not name.isascii() or name.upper() not in DRF_PROPERTY_NAMES:
        raise UnknownToken(f'Invalid property {raw_string!r}', raw_string, 0)
    return DRF_PROPERTY[name.upper()]
