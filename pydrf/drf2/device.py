import re

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ExpectedSeparator, UnknownToken
from .property import DRF_PROPERTY, get_default_property
from .scanner import Scanner

PATTERN_LEAD = re.compile("[A-Z0]", re.IGNORECASE | re.ASCII)
PATTERN_NAME = re.compile("[A-Z0-9_:]{1,62}", re.IGNORECASE | re.ASCII)
SEPARATORS = ':|'


class Device(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=3)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f'<Device {self.name}>'

    def canonical(self) -> str:
        return self.name

    def qualified_name(self, prop: DRF_PROPERTY) -> str:
        return get_qualified_device(self.name, prop)


def get_qualified_device(device_str: str, prop: DRF_PROPERTY) -> str:
    if len(device_str) < 3:
        raise ValueError(f'{device_str} is too short for device')
    assert prop in DRF_PROPERTY
    ld = list(device_str)
    ld[1] = prop.qualifier
    return ''.join(ld)


def scan_device(scanner: Scanner) -> tuple[Device, DRF_PROPERTY]:
    """
    Consume ``<lead><separator><name>`` and return the device together with
    the property implied by the separator.
    """
    lead = scanner.match(PATTERN_LEAD)
    if lead is None:
        scanner.fail(UnknownToken, 'Expected device name')
    sep = scanner.peek()
    if sep is None or sep not in SEPARATORS:
        scanner.fail(ExpectedSeparator, f'Expected one of {SEPARATORS!r} after {lead.group()!r}')
    scanner.pos += 1
    name = scanner.match(PATTERN_NAME)
    if name is None:
        scanner.fail(UnknownToken, 'Expected device name after separator')
    if PATTERN_NAME.match(scanner.text, scanner.pos) is not None:
        scanner.fail(UnknownToken, 'Device name is longer than 64 characters')
    device = Device(name=f'{lead.group()}:{name.group()}')
    return device, get_default_property(sep)


def parse_device(raw_string: str) -> Device:
    assert raw_string is not None
    scanner = Scanner(raw_string)
    device, _ = scan_device(scanner)
    scanner.expect_end()
    return device
