# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2026/10/18 15:40:19

from typing import Any
from warnings import warn

from .bridge import check_target, project
from .ini.consts import DEFAULT_SECTION
from .ini.model import IniDocument
from .ini.parser import IniParser


def loads(
    blob: str | bytes | bytearray, *,
    ignore_case: bool = False,
    no_default_section: bool = False,
    default_section: str = DEFAULT_SECTION,
    encoding: str | None = None
) -> IniDocument:
    """Parse INI text (or raw bytes) into an `IniDocument`.

    Raises `IniSyntaxError` on the first invalid line.
    """
    parser = IniParser(
        ignore_case=ignore_case,
        no_default_section=no_default_section,
        default_section=default_section)
    if isinstance(blob, (bytes, bytearray)):
        return parser.parse_bytes(blob, encoding)
    return parser.parse_string(blob)


def decode(
    blob: str | bytes | bytearray, target: Any, *,
    ignore_case: bool = False,
    no_default_section: bool = False,
    default_section: str = DEFAULT_SECTION,
    encoding: str | None = None
) -> None:
    """Parse `blob` and fill `target` (a mutable mapping or dataclass) with it.

    Raises:
        InvalidTarget: `target` is `None` or not writable. Checked first.
        IniSyntaxError: a line could not be classified. `target` untouched.
        BridgeError: sections don't fit the shape of `target`.
    """
    check_target(target)
    doc = loads(
        blob,
        ignore_case=ignore_case,
        no_default_section=no_default_section,
        default_section=default_section,
        encoding=encoding)
    project(doc, target)


def encode(obj: Any) -> bytes:
    """Not implemented yet: always gives empty bytes."""
    warn('ini: encode() is a stub and produces no output.', stacklevel=2)
    return b''
