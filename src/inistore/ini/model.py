# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Plain INI structure: an ordered list of sections,
each one an ordered list of `key=value` pairs.

Nothing is merged here. Duplicated keys or sections are kept as they are,
while lookups always take the *first* match.
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple, overload


class IniEntry(NamedTuple):
    key: str
    value: str


class IniSection:
    """One `[name]` section.

    Keeps entries in a list rather than a dict,
    so the file order (and duplicated keys, if any) survives a rewrite.
    """

    def __init__(
        self, name: str,
        entries: Iterable[tuple[str, str]] = ()
    ) -> None:
        self.name = name
        self.entries: list[IniEntry] = [IniEntry(*i) for i in entries]

    def __index(self, key: str) -> int:
        for idx, entry in enumerate(self.entries):
            if entry.key == key:
                return idx
        return -1

    def get(self, key: str, default: str = '') -> str:
        """Value of the first entry named `key`, or `default`."""
        idx = self.__index(key)
        return default if idx < 0 else self.entries[idx].value

    def set(self, key: str, value: str) -> None:
        """Overwrite the first entry named `key` in place,
        or append a new one when there's no such key."""
        idx = self.__index(key)
        if idx < 0:
            self.entries.append(IniEntry(key, value))
        else:
            self.entries[idx] = IniEntry(key, value)

    def keys(self) -> list[str]:
        return [i.key for i in self.entries]

    def __contains__(self, key: object) -> bool:
        return any(i.key == key for i in self.entries)

    def __iter__(self) -> Iterator[IniEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniSection):
            return NotImplemented
        return self.name == other.name and self.entries == other.entries

    def __repr__(self) -> str:
        return f'IniSection({self.name!r}, {self.entries!r})'


class IniDocument(Sequence[IniSection]):
    """... is simply a list of sections,
    representing a whole INI file for the duration of one operation.
    """

    def __init__(self, sections: Iterable[IniSection] = ()) -> None:
        self.__raw: list[IniSection] = list(sections)

    @overload
    def __getitem__(self, index: int) -> IniSection: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[IniSection]: ...

    def __getitem__(self, index):
        return self.__raw[index]

    def __len__(self) -> int:
        return len(self.__raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniDocument):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f'IniDocument({self.__raw!r})'

    def sections(self) -> list[str]:
        return [i.name for i in self.__raw]

    def find(self, name: str) -> IniSection | None:
        """First section declared as `[name]`, or `None`."""
        for i in self.__raw:
            if i.name == name:
                return i
        return None

    def append(self, section: IniSection) -> None:
        # same-named sections are NOT merged, just appended.
        self.__raw.append(section)

    def setdefault(self, name: str) -> IniSection:
        if (section := self.find(name)) is None:
            section = IniSection(name)
            self.__raw.append(section)
        return section

    def replace(
        self, name: str, entries: Iterable[tuple[str, str]]
    ) -> IniSection:
        """Replace all pairs of section `name` wholesale.

        The section keeps its position; if it's not declared yet,
        it would be appended to the end.
        """
        section = self.setdefault(name)
        section.entries = [IniEntry(*i) for i in entries]
        return section
