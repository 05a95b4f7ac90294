# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 14:00:12

from .codec import decode, encode, loads
from .errors import BridgeError, IniError, IniSyntaxError, InvalidTarget
from .ini import (
    DEFAULT_SECTION,
    IniDocument,
    IniFileParser,
    IniParser,
    IniSection
)

__all__ = [
    'decode', 'encode', 'loads',
    'IniDocument', 'IniSection', 'IniParser', 'IniFileParser',
    'DEFAULT_SECTION',
    'IniError', 'IniSyntaxError', 'InvalidTarget', 'BridgeError'
]
