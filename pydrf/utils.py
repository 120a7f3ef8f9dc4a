__all__ = ['ensure_immediate_event', 'get_device_name', 'replace_event', 'strip_event', 'has_event',
           'has_explicit_property', 'is_setting_property', 'prepare_for_write', 'sort_drf_strings',
           'requests_to_dataframe']

import logging

import pandas as pd

from .drf2 import DEFAULT_EVENT, DEFAULT_RANGE, DRF_PROPERTY, DefaultEvent, NeverEvent, \
    parse_event, parse_request
from .drf2.device import scan_device
from .drf2.property import scan_property
from .drf2.scanner import Scanner
from .errors import DRFError

logger = logging.getLogger(__name__)

# Read properties and their writable counterparts
_WRITE_PROPERTY = {
    DRF_PROPERTY.READING: DRF_PROPERTY.SETTING,
    DRF_PROPERTY.STATUS: DRF_PROPERTY.CONTROL,
}


def ensure_immediate_event(drf: str) -> str:
    """Ensure DRF has immediate event (@I) if no event specified.

    Args:
        drf: DRF string (e.g., "M:OUTTMP" or "M:OUTTMP@p,1000")

    Returns:
        DRF with @I appended if no event was present, otherwise the input unchanged.
    """
    request = parse_request(drf)
    if isinstance(request.event, DefaultEvent):
        return f"{drf}@I"
    return drf


def get_device_name(drf: str) -> str:
    """Extract the device name, e.g. "M:OUTTMP" from "M|OUTTMP[0:10]@p,1000"."""
    return parse_request(drf).device.name


def replace_event(drf: str, event_str: str) -> str:
    """Replace or add event in a DRF string.

    Args:
        drf: DRF string
        event_str: New event, with or without '@' (e.g., "p,1000", "I", "@E,0F")

    Returns:
        Canonical DRF with the new event
    """
    request = parse_request(drf)
    return request.to_canonical(event=parse_event(event_str))


def strip_event(drf: str) -> str:
    """Canonical DRF without its event."""
    return parse_request(drf).to_canonical(event=DEFAULT_EVENT)


def has_event(drf: str) -> bool:
    return not isinstance(parse_request(drf).event, DefaultEvent)


def has_explicit_property(drf: str) -> bool:
    """Check if DRF names its property (e.g. .SETTING, .READING).

    The separator character alone (M|OUTTMP) does not count as explicit.
    """
    parse_request(drf)
    scanner = Scanner(drf)
    scan_device(scanner)
    return scan_property(scanner) is not None


def is_setting_property(drf: str) -> bool:
    return parse_request(drf).property == DRF_PROPERTY.SETTING


def prepare_for_write(drf: str) -> str:
    """Prepare a DRF string for write operations.

    READING becomes SETTING and STATUS becomes CONTROL, other properties are
    preserved. The event is forced to @N since writes never need data back.

    Returns:
        Canonical DRF ready for write (e.g. "Z:ACLTST.SETTING.SCALED@N")
    """
    request = parse_request(drf)
    new_property = _WRITE_PROPERTY.get(request.property, request.property)
    return request.to_canonical(property=new_property, event=NeverEvent())


def sort_drf_strings(devices: list[str]):
    """ Return scalar/status/array DRF lists """
    double = []
    status = []
    array = []
    for d in devices:
        drf2 = parse_request(d)
        if drf2.property in [DRF_PROPERTY.READING, DRF_PROPERTY.SETTING]:
            if drf2.range == DEFAULT_RANGE:
                double.append(d)
            else:
                array.append(d)
        elif drf2.property in [DRF_PROPERTY.STATUS, DRF_PROPERTY.CONTROL]:
            if drf2.range == DEFAULT_RANGE:
                status.append(d)
            else:
                raise DRFError(f'Status device with range is not supported: {d}')
        else:
            raise DRFError(f'Device {d} not supported for sorting ({drf2.property.name})')
    logger.debug(f'Sorted {len(devices)} devices: {len(double)} scalar, {len(status)} status,'
                 f' {len(array)} array')
    return double, status, array


def requests_to_dataframe(devices: list[str]) -> pd.DataFrame:
    """
    Parse a batch of DRF strings into a table, one row per input
    :param devices: DRF strings, any spelling
    :return: DataFrame with drf, device, property, field, range, event and canonical columns
    """
    rowlist = []
    for d in devices:
        req = parse_request(d)
        rowlist.append({'drf': d,
                        'device': req.device.name,
                        'property': req.property.name,
                        'field': None if req.field is None else req.field.name,
                        'range': req.range.canonical(),
                        'event': req.event.canonical(),
                        'canonical': req.canonical()
                        })
    df = pd.DataFrame(data=rowlist, columns=['drf', 'device', 'property', 'field', 'range', 'event',
                                             'canonical'])
    return df
