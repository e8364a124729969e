# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2024/10/12 21:40:18
# @Author : Kariko Lin

"""Read-modify-write access to a single INI file.

Nothing is cached: every call parses the whole file again,
and every write serializes the whole document back.
Which is fine for small, rarely updated configs, and that's all it's for.

There's NO locking. Two writers on the same file may lose updates.
"""

import logging
from collections.abc import Iterable
from os import PathLike
from os.path import exists, getsize

from .ini import IniDocument, IniEntry, IniParser

__all__ = ['IniStore']

logger = logging.getLogger(__name__)


class IniStore:
    """Config store over one INI file.

    I/O errors are never raised to the caller. They get logged,
    then reported as `None`, `''` or `False` depending on the operation.

    About empty sections: a bare `[name]` header counts as found by default,
    so `read_section()` gives `[]` for it.
    Pass `strict_sections=True` to report such a section as missing (`None`).
    """

    def __init__(
        self, path: str | PathLike[str], *,
        encoding: str | None = 'utf-8',
        strict_sections: bool = False
    ) -> None:
        self._parser = IniParser(path, encoding)
        self._strict = strict_sections
        if exists(path):
            return
        try:
            with open(path, 'w', encoding=encoding):
                logger.debug('Created empty INI file %s', path)
        except OSError as e:
            logger.warning('Cannot create %s: %s', path, e)

    @property
    def path(self) -> str | PathLike[str]:
        return self._parser.filename

    def read_all(self) -> IniDocument | None:
        """Parse the whole file. `None` if it cannot be opened."""
        try:
            return self._parser.read()
        except OSError as e:
            logger.warning('Cannot read %s: %s', self.path, e)
            return None

    def _flush(self, doc: IniDocument) -> bool:
        try:
            self._parser.write(doc)
        except (OSError, UnicodeEncodeError) as e:
            logger.warning('Cannot write %s: %s', self.path, e)
            return False
        return True

    def read_section(self, name: str) -> list[IniEntry] | None:
        """Entries of the first `[name]` section, in file order.

        Returns `None` if the section is missing or the file is unreadable,
        and with `strict_sections` also if the section has no entries.
        """
        if (doc := self.read_all()) is None:
            return None
        if (section := doc.find(name)) is None:
            return None
        if self._strict and not section.entries:
            return None
        return list(section.entries)

    def read_value(self, section: str, key: str) -> str:
        """Missing section, missing key and empty value all give `''`."""
        if (doc := self.read_all()) is None:
            return ''
        if (sect := doc.find(section)) is None:
            return ''
        return sect.get(key)

    def read_entry(self, section: str, entry: IniEntry) -> str:
        # only the key matters here.
        return self.read_value(section, entry.key)

    def write_section(
        self, name: str, entries: Iterable[tuple[str, str]]
    ) -> bool:
        """Replace (or append) section `name` and rewrite the whole file."""
        if (doc := self.read_all()) is None:
            return False
        doc.replace(name, entries)
        return self._flush(doc)

    def write_value(self, section: str, key: str, value: str) -> bool:
        """Update the first `key` in `[section]` in place,
        creating the section or the key when missing."""
        if (doc := self.read_all()) is None:
            return False
        doc.setdefault(section).set(key, value)
        return self._flush(doc)

    def write_entry(self, section: str, entry: IniEntry) -> bool:
        return self.write_value(section, *entry)

    def empty(self) -> bool:
        """`True` if the file doesn't exist or has no bytes at all."""
        try:
            return getsize(self.path) == 0
        except OSError:
            return True

    def __str__(self) -> str:
        return f'IniStore: {self._parser}'
