# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 14:01:33

from .consts import DEFAULT_SECTION, LineKind
from .model import IniSection, IniDocument
from .parser import (
    ClassifiedLine,
    IniParser,
    IniFileParser,
    classify_line,
    decode_bytes,
    trim_with_quotes
)
