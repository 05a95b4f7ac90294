# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/18 14:37:08

"""Line-oriented INI reader.

Each line is stripped first, then:
1. blank, or starting with `;` / `#` -> skipped.
2. `name[] = val` -> recognized, but dropped (no array support).
3. `key = val`    -> stored into the current section.
4. `[section]`    -> switches the current section.
5. anything else  -> `IniSyntaxError`, and the whole parse stops there.

The order matters: `tags[] = a` also fits `key = val`,
and `[a=b]` is read as an assignment, not a header.
"""

import logging
from io import StringIO, TextIOBase
from typing import NamedTuple

from chardet import detect as guess_codec

from ..abstract import FileHandler
from ..errors import IniSyntaxError
from .consts import (
    ASSIGN_ARRAY_PATTERN,
    ASSIGN_PATTERN,
    COMMENT_MARKS,
    DEFAULT_SECTION,
    QUOTES_PATTERN,
    SECTION_PATTERN,
    LineKind
)
from .model import IniDocument

# below this, chardet is guessing rather than detecting.
MIN_CODEC_CONFIDENCE = 0.8

logger = logging.getLogger(__name__)


class ClassifiedLine(NamedTuple):
    kind: LineKind
    key: str = ''    # section name, for LineKind.SECTION
    value: str = ''


def trim_with_quotes(value: str) -> str:
    """Strip whitespace, then one pair of *matching* surrounding quotes.

    `"hello"` and `'hello'` give `hello`; `"hello'` stays as is.
    """
    ret = value.strip()
    if (groups := QUOTES_PATTERN.fullmatch(ret)) is not None:
        if groups[1] == groups[3]:
            ret = groups[2]
    return ret


def classify_line(line: str) -> ClassifiedLine:
    """Classify one stripped, non-blank, non-comment line."""
    if (groups := ASSIGN_ARRAY_PATTERN.fullmatch(line)) is not None:
        return ClassifiedLine(
            LineKind.ARRAY, groups[1].strip(), trim_with_quotes(groups[2]))
    if (groups := ASSIGN_PATTERN.fullmatch(line)) is not None:
        return ClassifiedLine(
            LineKind.ASSIGN, groups[1].strip(), trim_with_quotes(groups[2]))
    if (groups := SECTION_PATTERN.fullmatch(line)) is not None:
        return ClassifiedLine(LineKind.SECTION, groups[1].strip())
    return ClassifiedLine(LineKind.INVALID)


def decode_bytes(raw: bytes, encoding: str | None = None) -> str:
    """Decode raw INI bytes.

    With no `encoding` given, try UTF-8 (BOM tolerated) first,
    then let `chardet` guess, and finally fall back to latin-1.
    """
    if encoding is not None:
        return raw.decode(encoding)
    try:
        return raw.decode('utf-8-sig')
    except UnicodeDecodeError:
        pass

    codec = guess_codec(raw)
    if not codec['encoding'] or codec['confidence'] < MIN_CODEC_CONFIDENCE:
        codec = {'encoding': 'latin-1', 'confidence': 0.0}
    logger.debug(
        f"INI bytes are not UTF-8, decoding as {codec['encoding']} "
        f"(confidence {codec['confidence']:.2f}).")
    try:
        return raw.decode(codec['encoding'])
    except (UnicodeDecodeError, LookupError):
        # latin-1 maps every byte, this never fails.
        return raw.decode('latin-1')


class IniParser:
    """Holds the options only; every parse runs on a fresh `IniDocument`,
    so one parser may be shared between threads.
    """
    def __init__(
        self, *,
        ignore_case: bool = False,
        no_default_section: bool = False,
        default_section: str = DEFAULT_SECTION
    ) -> None:
        self.ignore_case = ignore_case
        self.no_default_section = no_default_section
        self.default_section = default_section

    def _new_document(self) -> IniDocument:
        return IniDocument(
            ignore_case=self.ignore_case,
            no_default_section=self.no_default_section,
            default_section=self.default_section)

    def scan(self, buf: TextIOBase) -> tuple[IniDocument, int]:
        """Parse an already decoded text stream.

        Returns the document and the amount of characters gone through,
        line breaks between lines included.
        Raises `IniSyntaxError` on the first line it cannot make sense of;
        its `consumed` counts up to and including that line.
        """
        ret = self._new_document()
        section = self.default_section
        lineno, consumed = 0, -1
        while i := buf.readline():
            lineno += 1
            i = i.removesuffix('\n').removesuffix('\r')
            consumed += len(i) + 1

            line = i.strip()
            if not line or line[0] in COMMENT_MARKS:
                continue

            match classify_line(line):
                case ClassifiedLine(LineKind.ARRAY, key, _):
                    logger.debug(
                        f'line {lineno}: array assignment "{key}[]" dropped.')
                case ClassifiedLine(LineKind.ASSIGN, key, value):
                    ret.set(section, key, value)
                case ClassifiedLine(LineKind.SECTION, name, _):
                    section = ret.ensure_section(name)
                case _:
                    raise IniSyntaxError(lineno, line, consumed)
        return ret, max(consumed, 0)

    def readstream(self, buf: TextIOBase) -> IniDocument:
        return self.scan(buf)[0]

    def parse_string(self, data: str) -> IniDocument:
        # newline='\n' by default, so only '\n' splits lines.
        return self.readstream(StringIO(data))

    def parse_bytes(
        self, data: bytes | bytearray, encoding: str | None = None
    ) -> IniDocument:
        return self.parse_string(decode_bytes(bytes(data), encoding))


class IniFileParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        ignore_case: bool = False,
        no_default_section: bool = False,
        default_section: str = DEFAULT_SECTION
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self.parser = IniParser(
            ignore_case=ignore_case,
            no_default_section=no_default_section,
            default_section=default_section)

    def read(self) -> IniDocument:
        """Read the file this `IniFileParser` points at.

        CAUTION: `OSError` is not caught here.
        """
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        return self.parser.parse_bytes(raw, self._codec)

    def write(self, instance: IniDocument) -> None:
        raise NotImplementedError('ini: encoding back to INI text is not supported.')

    def __str__(self) -> str:
        codec = self._codec or 'auto'
        return "INI file: " + super().__str__() + f"({codec})"
