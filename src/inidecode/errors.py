# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/18 14:10:37


class IniError(Exception):
    """Base of everything `inidecode` raises on purpose."""
    pass


class InvalidTarget(IniError, TypeError):
    """`decode()` got `None`, or something it cannot write into."""
    def __init__(self, target: object) -> None:
        self.target = target
        what = 'None' if target is None else type(target).__name__
        super().__init__(f'ini: cannot decode into {what}')


class IniSyntaxError(IniError, ValueError):
    """A line that is neither blank, comment, header nor assignment.

    `source` is the offending line without surrounding whitespace,
    `consumed` the amount of characters read up to the end of it.
    """
    def __init__(self, line: int, source: str, consumed: int = 0) -> None:
        self.line = line
        self.source = source
        self.consumed = consumed
        super().__init__(f'invalid INI syntax on line {line}: {source}')


class BridgeError(IniError, TypeError):
    """The decoded document does not fit the shape of the target."""
    pass
