# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/18 14:02:11

from enum import Enum
from re import compile as regex

# pairs before any `[section]` header land here.
DEFAULT_SECTION = 'DEFAULT'

COMMENT_MARKS = (';', '#')


class LineKind(str, Enum):
    ARRAY = 'array'
    ASSIGN = 'assign'
    SECTION = 'section'
    INVALID = 'invalid'


# foo[] = val
ASSIGN_ARRAY_PATTERN = regex(r'([^=\[\]]+)\[\][^=]*=(.*)')
# key = val
ASSIGN_PATTERN = regex(r'([^=]+)=(.*)')
# [section]
SECTION_PATTERN = regex(r'\[(.*)\]')
QUOTES_PATTERN = regex(r'([\'"])(.*)([\'"])')
