"""
pydrf - Device Reference Format (DRF2) parsing and canonicalization
"""

__version__ = '0.1.0'
__author__ = "Nikita Kuklev"

import sys
import logging

logging.basicConfig(
    format='[%(asctime)s] {%(funcName)s:%(lineno)d} %(levelname)s - %(message)s',
    level=logging.INFO,
    stream=sys.stdout)

from .drf2 import DiscreteRequest, parse_request, parse
from .errors import DRFError, DRFParseError, ParseErrorKind
from .settings import DRFSettings
