from .event import DRF_EVENT, parse_event, canonical_delay, DefaultEvent, NeverEvent, ImmediateEvent, \
    PeriodicEvent, ClockEvent, StateEvent, CLOCK_TYPE, STATE_OP, DEFAULT_EVENT
from .range import DRF_RANGE, parse_range, FULL_RANGE, ARRAY_RANGE, BYTE_RANGE, DEFAULT_RANGE
from .property import DRF_PROPERTY, parse_property
from .field import DRF_FIELD, parse_field, get_default_field
from .device import Device, parse_device, get_qualified_device
from .drf2 import DiscreteRequest, parse_request, parse
