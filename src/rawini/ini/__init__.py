# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/21 22:12:29
# @Author : Kariko Lin

from io import StringIO

from .consts import NEWLINE
from .model import (
    IniEntry,
    IniSection,
    IniDocument,
    IniError,
    DuplicateSectionError,
    SectionNotFoundError,
    EntryNotFoundError
)
from .parser import (
    is_section_header,
    parse_section_name,
    is_semantic_line,
    parse_lines,
    readstream,
    writestream,
    IniParser,
    IniJsonParser,
    IniYamlParser
)


def loads(text: str, separator: str | None = None) -> IniDocument:
    return readstream(StringIO(text), separator)


def dumps(doc: IniDocument, newline: str = NEWLINE) -> str:
    with StringIO() as buf:
        writestream(doc, buf, newline)
        return buf.getvalue()


def load(
    filename: str, encoding: str | None = None,
    separator: str | None = None
) -> IniDocument:
    return IniParser(filename, encoding, separator=separator).read()


def dump(
    doc: IniDocument, filename: str,
    encoding: str | None = 'utf-8', newline: str = NEWLINE
) -> None:
    IniParser(filename, encoding, newline).write(doc)
