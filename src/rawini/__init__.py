# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/21 22:08:50
# @Author : Kariko Lin

import logging

from .ini import (
    IniEntry, IniSection, IniDocument,
    IniError, DuplicateSectionError, SectionNotFoundError, EntryNotFoundError,
    IniParser, IniJsonParser, IniYamlParser,
    load, loads, dump, dumps
)

__all__ = [
    'IniEntry', 'IniSection', 'IniDocument',
    'IniError', 'DuplicateSectionError',
    'SectionNotFoundError', 'EntryNotFoundError',
    'IniParser', 'IniJsonParser', 'IniYamlParser',
    'load', 'loads', 'dump', 'dumps'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
