import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from ..errors import DRFParseError
from ..settings import DRFSettings
from .device import Device, scan_device
from .event import DEFAULT_EVENT, DRF_EVENT, EVENT_TYPES, scan_event
from .field import ALLOWED_FIELD_FOR_PROPERTY, DEFAULT_FIELD_FOR_PROPERTY, DRF_FIELD, \
    is_field_allowed, scan_field
from .property import DRF_PROPERTY, scan_property
from .range import DEFAULT_RANGE, DRF_RANGE, RANGE_TYPES, scan_range
from .scanner import Scanner

logger = logging.getLogger(__name__)


class DiscreteRequest(BaseModel):
    """
    A fully resolved DRF request. The field is always explicit for properties
    that have fields, and None for those that do not.
    """
    model_config = ConfigDict(frozen=True)

    device: Device
    property: DRF_PROPERTY
    range: RANGE_TYPES = DEFAULT_RANGE
    field: Optional[DRF_FIELD] = None
    event: EVENT_TYPES = DEFAULT_EVENT

    @model_validator(mode='before')
    @classmethod
    def fill_default_field(cls, data):
        if isinstance(data, dict) and data.get('field') is None and 'property' in data:
            prop = data['property']
            if isinstance(prop, DRF_PROPERTY):
                data = {**data, 'field': DEFAULT_FIELD_FOR_PROPERTY[prop]}
        return data

    @model_validator(mode='after')
    def check_field(self):
        if not is_field_allowed(self.property, self.field):
            raise ValueError(f'Field {self.field} is not allowed for property {self.property.name}')
        return self

    def __str__(self):
        return self.canonical()

    def __repr__(self):
        return f'<DiscreteRequest {self.canonical()}>'

    @property
    def is_reading(self):
        return self.property == DRF_PROPERTY.READING

    @property
    def is_setting(self):
        return self.property == DRF_PROPERTY.SETTING

    @property
    def is_status(self):
        return self.property == DRF_PROPERTY.STATUS

    @property
    def is_control(self):
        return self.property == DRF_PROPERTY.CONTROL

    @property
    def parts(self):
        return self.device, self.property, self.range, self.field, self.event

    def canonical(self) -> str:
        field = '' if self.field is None else self.field.canonical()
        return f'{self.device.canonical()}{self.property.canonical()}{self.range.canonical()}' \
               f'{field}{self.event.canonical()}'

    def replace(self, device: Optional[Device] = None, property: Optional[DRF_PROPERTY] = None,
                range: Optional[DRF_RANGE] = None, field: Optional[DRF_FIELD] = None,
                event: Optional[DRF_EVENT] = None
                ) -> 'DiscreteRequest':
        """
        New request with some parts swapped. Changing the property keeps the
        current field when it is legal for the new property, otherwise the
        new property's default field is used.
        """
        p = property or self.property
        if field is None and self.field in ALLOWED_FIELD_FOR_PROPERTY[p]:
            field = self.field
        return DiscreteRequest(device=device or self.device,
                               property=p,
                               range=range or self.range,
                               field=field,
                               event=event or self.event)

    def to_canonical(self, device=None, property=None, range=None, field=None, event=None) -> str:
        return self.replace(device, property, range, field, event).canonical()

    def name_as(self, property: DRF_PROPERTY) -> str:
        return self.device.qualified_name(property)


def _parse(scanner: Scanner) -> DiscreteRequest:
    device, default_property = scan_device(scanner)
    # the property may only appear before the range, the field only after it
    prop = scan_property(scanner) or default_property
    rng = scan_range(scanner)
    field = scan_field(scanner, prop)
    event = scan_event(scanner)
    scanner.expect_end()
    return DiscreteRequest(device=device, property=prop, range=rng, field=field, event=event)


def parse_request(device_str: str) -> DiscreteRequest:
    assert device_str is not None
    try:
        req = _parse(Scanner(device_str))
    except DRFParseError as e:
        if DRFSettings.log_failures:
            logger.debug(f'Rejected DRF {device_str!r}: {e}')
        raise
    if DRFSettings.log_parses:
        logger.debug(f'Parsed {device_str!r} as {req.canonical()}')
    return req


parse = parse_request
