# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/18 14:21:50

"""
Decoded INI structure: a document of sections, a section of string pairs.

No inheritance, no `+=`, no array values. Just what a plain INI carries.
"""

from collections.abc import MutableMapping
from typing import Callable, Iterator, Mapping

from .consts import DEFAULT_SECTION


class IniSection(MutableMapping[str, str]):
    """One INI section.

    All pairs *should* be `str: str` (even when the value is an empty string),
    though that is not enforced in runtime.

    `on_first_set` is called with the section on its first write,
    for sections not yet attached to a document.
    """
    def __init__(
        self, section_name: str, /,
        pairs: Mapping[str, str] | None = None, *,
        on_first_set: Callable[["IniSection"], None] | None = None
    ) -> None:
        self._name = section_name
        self.__data: dict[str, str] = {}
        self.__attach = None
        if pairs:
            self.update(pairs)
        self.__attach = on_first_set

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__data[key]

    # last assignment wins.
    def __setitem__(self, key: str, value: str) -> None:
        self.__data[key] = value
        if self.__attach is not None:
            attach, self.__attach = self.__attach, None
            attach(self)

    def __delitem__(self, key: str) -> None:
        del self.__data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__data

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__data))

    def to_dict(self) -> dict[str, str]:
        return self.__data.copy()


class IniDocument(MutableMapping[str, IniSection]):
    """A whole INI document. Sections are kept in order of first assignment:

        ```ini
        key = val  ; goes to self.header, i.e. `[DEFAULT]`.

        [section]
        key233 = val666
        [section]   ; same section again, extended rather than replaced.
        key114 = val514
        [empty]     ; never assigned, never shows up.
        ```

    With `ignore_case`, section names and keys are lower-cased on `set()`.
    `no_default_section` is only kept around; nothing reads it yet.
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
        self.__raw: dict[str, IniSection] = {}

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw[key] = IniSection(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return f'IniDocument({self.to_dict()!r})'

    @property
    def header(self) -> IniSection:
        """Pairs written before any section header.

        Writes go into the document; the default section shows up
        on the first one, like any other section.
        """
        name = self._fold(self.default_section)
        if name in self.__raw:
            return self.__raw[name]
        return IniSection(name, on_first_set=self.__adopt)

    def __adopt(self, section: IniSection) -> None:
        self.__raw.setdefault(section.name, section)

    def _fold(self, name: str) -> str:
        return name.lower() if self.ignore_case else name

    def set(self, section: str, key: str, value: str) -> None:
        """Write `key = value` into `section`, creating it if absent."""
        section, key = self._fold(section), self._fold(key)
        if section in self.__raw:
            self.__raw[section][key] = value
            return
        self.__raw[section] = IniSection(section, {key: value})

    def ensure_section(self, name: str) -> str:
        """Called on `[name]`. Returns the name to switch to.

        Creation is deferred to the first `set()`,
        so a header without pairs leaves nothing behind.
        """
        return name

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in self.__raw.items()}
