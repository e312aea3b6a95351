# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/21 22:40:17
# @Author : Kariko Lin

"""Note: the parser never rejects a line.

Anything it can't read as `key=value` becomes a dummy entry (or header
text, before the first section), so `dumps(loads(text)) == text` holds as
long as every line ends with `\\n`. Mixed terminators are NOT kept: CRLF
input gets written back with the parser's `newline`.
"""

import json
import logging
import warnings
from io import StringIO
from typing import Iterable, Protocol, TypedDict

import yaml
from chardet import detect as guess_codec

from ..abstract import FileHandler
from .consts import (
    CODEC_CONFIDENCE,
    COMMENT_MARKERS,
    FALLBACK_CODECS,
    NEWLINE,
    PAIRING,
    SECTION_HEADER,
    SECTION_NAME_TRIM,
)
from .model import IniDocument, IniError, IniSection


class _LineSource(Protocol):
    def readline(self) -> str: ...


class _LineSink(Protocol):
    def write(self, s: str, /) -> int: ...


def is_section_header(line: str) -> bool:
    return SECTION_HEADER.match(line) is not None


def parse_section_name(line: str) -> str:
    """删掉所有`[`、`]`和空格。注意不是 strip：`" [ti tle] "`得到`"title"`。"""
    return SECTION_NAME_TRIM.sub('', line)


def is_semantic_line(line: str) -> bool:
    if not line:
        return False
    if line[0] in COMMENT_MARKERS:
        return False
    return PAIRING in line


def _chomp(line: str) -> str:
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line


def parse_lines(
    lines: Iterable[str], separator: str | None = None
) -> IniDocument:
    """逐行构建`IniDocument`。行尾的`\\n`（及`\\r`）会被去掉。"""
    ret = IniDocument(separator)
    this_sect: IniSection | None = None
    for i in lines:
        i = _chomp(i)
        if is_section_header(i):
            name = parse_section_name(i)
            if name in ret:
                warnings.warn(
                    f'小节 [{name}] 重复出现。两处都会保留并写回，'
                    '但按名查找只能找到第一个。')
            this_sect = IniSection(name)
            ret.sections.append(this_sect)
        elif this_sect is not None:
            if is_semantic_line(i):
                # only the first `=` splits, `a=b=c` -> ('a', 'b=c')
                key, val = i.split(PAIRING, 1)
                this_sect.add(key, val)
            else:
                this_sect.add_dummy(i)
        else:
            ret.header.append(i)
    return ret


def readstream(
    buf: _LineSource, separator: str | None = None
) -> IniDocument:
    """读取解码好的字符串流。

    如没有特殊需求，直接调用`IniParser(...).read()`或`loads()`便是。
    """
    return parse_lines(iter(buf.readline, ''), separator)


def writestream(
    doc: IniDocument, buf: _LineSink, newline: str = NEWLINE
) -> None:
    for i in doc.lines():
        buf.write(f'{i}{newline}')


class IniHandler(FileHandler[IniDocument]):
    """读写`IniDocument`的文件处理器基类（INI 原文、JSON、YAML）。"""


class IniParser(IniHandler):
    def __init__(
        self, filename: str,
        encoding: str | None = None,
        newline: str = NEWLINE,
        separator: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._newline = newline
        self._sep = separator

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = guess_codec(raw)
        encoding = codec.get('encoding')
        if encoding is None or codec['confidence'] < CODEC_CONFIDENCE:
            encoding = FALLBACK_CODECS[0]
        logging.info(f'`{filename}` 按 {encoding} 重新解码。')

        # fallbacks
        try:
            buf = raw.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            logging.warning(
                f'`{filename}` 无法按 {encoding} 解码，'
                f'改用 {FALLBACK_CODECS[-1]}。')
            buf = raw.decode(FALLBACK_CODECS[-1])
        return StringIO(buf)

    def read(self) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        文件不存在、无权限等`OSError`照常抛出。
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                ret = readstream(fp, self._sep)
        except UnicodeDecodeError:
            logging.warning(
                f'`{self._fn}` 不是 {self._codec or "系统默认"} 编码，'
                '尝试自动识别。')
            ret = readstream(self._decode_file(self._fn), self._sep)
        logging.debug(f'读取 `{self._fn}`：{ret!r}')
        return ret

    def write(self, instance: IniDocument) -> None:
        # newline='' keeps `self._newline` as is on every platform.
        with open(self._fn, 'w', encoding=self._codec, newline='') as fp:
            writestream(instance, fp, self._newline)
        logging.debug(f'写入 `{self._fn}`：{instance!r}')

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"


class _SemanticPack(TypedDict):
    key: str
    value: str


class _SectionPack(TypedDict):
    name: str
    # plain str for dummy lines
    entries: list[_SemanticPack | str]


class _IniSnapshot(TypedDict):
    header: list[str]
    sections: list[_SectionPack]


def _to_snapshot(doc: IniDocument) -> _IniSnapshot:
    return _IniSnapshot(
        header=list(doc.header),
        sections=[
            _SectionPack(
                name=sect.name,
                entries=[
                    _SemanticPack(key=i.key, value=i.value)
                    if i.semantic else i.key
                    for i in sect.entries
                ])
            for sect in doc.sections
        ])


def _from_snapshot(src: _IniSnapshot | None) -> IniDocument:
    # an empty YAML file loads as None.
    if src is None:
        src = _IniSnapshot(header=[], sections=[])
    elif not isinstance(src, dict):
        raise IniError(
            f'快照顶层应为对象（header、sections），实际是 {type(src).__name__}。')
    ret = IniDocument()
    ret.header.extend(src.get('header') or [])
    for sect in src.get('sections') or []:
        this_sect = IniSection(sect['name'])
        for i in sect.get('entries') or []:
            if isinstance(i, str):
                this_sect.add_dummy(i)
            else:
                this_sect.add(i['key'], i['value'])
        ret.sections.append(this_sect)
    return ret


class IniJsonParser(IniHandler):
    """把整个文档（含注释、空行）存成 JSON，读回来还是同一个文档。"""
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return _from_snapshot(json.load(fp))

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(
                _to_snapshot(instance), fp, ensure_ascii=False, indent=indent)


class IniYamlParser(IniHandler):
    """同`IniJsonParser`，只是换成 YAML。"""
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return _from_snapshot(yaml.load(fp, yaml.SafeLoader))

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                _to_snapshot(instance), fp,
                allow_unicode=True, sort_keys=False, indent=indent)
