# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2023/11/14 20:01:52
# @Author : Chloride

import logging

from .ini import IniEntry, IniSection, IniDocument, IniParser, loads, dumps
from .store import IniStore

__all__ = [
    'IniEntry', 'IniSection', 'IniDocument', 'IniParser',
    'loads', 'dumps',
    'IniStore'
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
