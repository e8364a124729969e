# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Line based INI reader/writer.

The format is kept as plain as possible:
- `[name]` opens a section, no inheritance, no `;` comments;
- `key=value` splits at the FIRST `=`, nothing gets stripped;
- blank lines are skipped, anything else is silently dropped.

`loads()` and `dumps()` never touch the file system,
`IniParser` is the one that does the real I/O.
"""

import logging
from io import StringIO, TextIOBase
from locale import getpreferredencoding
from os import PathLike
from typing import TextIO

import chardet

from .model import IniDocument, IniEntry, IniSection
from ..abstract import FileHandler

__all__ = ['IniParser', 'loads', 'dumps']

logger = logging.getLogger(__name__)


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @property
    def encoding(self) -> str | None:
        return self._codec

    @staticmethod
    def readstream(buf: TextIOBase | TextIO) -> IniDocument:
        """Parse an already decoded text stream.

        Lines are split on `\\n` only, a trailing `\\r` is dropped
        so CRLF files read the same. Usually `self.read()` is what you want.
        """
        ret = IniDocument()
        this_sect: IniSection | None = None
        lineno = 0
        while i := buf.readline():
            lineno += 1
            i = i.rstrip('\n')
            if i.endswith('\r'):
                i = i[:-1]
            if not i:
                continue
            if i[0] == '[' and i[-1] == ']':
                this_sect = IniSection(i[1:-1])
                ret.append(this_sect)
            elif '=' in i and this_sect is not None:
                key, val = i.split('=', 1)
                this_sect.entries.append(IniEntry(key, val))
            else:
                logger.debug('Line %d dropped: %r', lineno, i)
        return ret

    @staticmethod
    def writestream(doc: IniDocument, fp: TextIOBase | TextIO) -> None:
        for section in doc:
            fp.write(f'[{section.name}]\n')
            for key, val in section:
                fp.write(f'{key}={val}\n')
            fp.write('\n')

    @staticmethod
    def _decode_file(
        filename: str | PathLike[str], failed: str | None = None
    ) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        used = codec['encoding']

        # fallbacks
        try:
            buf = raw.decode(used)
        except (UnicodeDecodeError, LookupError):
            # every byte is valid latin-1, so this one never fails.
            used = 'latin-1'
            buf = raw.decode(used)
        logger.warning(
            'Cannot decode %s as %s, read as %s instead.',
            filename, failed, used)
        # same as `read()`: split on `\n` only.
        return StringIO(buf, newline='\n')

    def read(self) -> IniDocument:
        """Parse the file this parser is bound to.

        May raise `OSError`.
        """
        try:
            with open(
                self._fn, 'r', encoding=self._codec, newline='\n'
            ) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            return self.readstream(self._decode_file(
                self._fn, self._codec or getpreferredencoding(False)))

    def write(self, instance: IniDocument) -> None:
        """Overwrite the file with the whole document.

        The text is encoded before the file gets opened, so
        a `UnicodeEncodeError` leaves the old file untouched.
        Always writes `\\n` line endings. May raise `OSError`.
        """
        raw = dumps(instance).encode(
            self._codec or getpreferredencoding(False))
        with open(self._fn, 'wb') as fp:
            fp.write(raw)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"


def loads(text: str) -> IniDocument:
    """Parse INI text into a fresh `IniDocument`."""
    return IniParser.readstream(StringIO(text, newline='\n'))


def dumps(doc: IniDocument) -> str:
    buf = StringIO()
    IniParser.writestream(doc, buf)
    return buf.getvalue()
