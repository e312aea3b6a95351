# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/21 22:18:33
# @Author : Kariko Lin

"""
Lossless INI structure.

Nothing here gets thrown away: comments, blank lines and lines we can't
make sense of are kept as "dummy" entries, and text before the very first
section stays in `IniDocument.header`. As for reading and writing, see
`ini.parser`.
"""

from dataclasses import dataclass, field
from typing import Iterator

from .consts import NEWLINE, PAIRING, VALUE_SEPARATOR


class IniError(Exception):
    """INI 文档操作失败的基类。"""
    pass


class DuplicateSectionError(IniError):
    def __init__(self, section: str) -> None:
        super().__init__(f'小节 [{section}] 已存在。')
        self.section = section


class SectionNotFoundError(IniError, LookupError):
    def __init__(self, section: str) -> None:
        super().__init__(f'找不到小节 [{section}]。')
        self.section = section


class EntryNotFoundError(IniError, LookupError):
    def __init__(self, section: str, key: str) -> None:
        super().__init__(f'小节 [{section}] 中找不到键 "{key}"。')
        self.section = section
        self.key = key


@dataclass
class IniEntry:
    """小节里的一行。

    `semantic`为假时，`key`就是原样保存的整行文本（注释、空行、没有`=`的行），
    `value`恒为空串。
    """
    key: str
    value: str = ''
    semantic: bool = True

    def overwrite(self, value: str) -> None:
        self.value = value
        # once a value is given, it's a pair.
        self.semantic = True

    def append(self, value: str, separator: str = VALUE_SEPARATOR) -> None:
        """追加值。原值为空时不加分隔符。"""
        self.value = f'{self.value}{separator}{value}' if self.value else value
        self.semantic = True

    def __str__(self) -> str:
        if self.semantic:
            return f'{self.key}{PAIRING}{self.value}'
        return self.key


@dataclass
class IniSection:
    """按顺序保存词条的小节。允许重复键，查找时以第一个为准。"""
    name: str
    entries: list[IniEntry] = field(default_factory=list)

    def entry(self, key: str) -> IniEntry | None:
        """按键查找第一个词条。返回的是小节里的那个对象本身，改了就是改了。"""
        for i in self.entries:
            if i.key == key:
                return i
        return None

    def add(self, key: str, value: str) -> IniEntry:
        ret = IniEntry(key, value)
        self.entries.append(ret)
        return ret

    def add_dummy(self, line: str) -> IniEntry:
        ret = IniEntry(line, '', semantic=False)
        self.entries.append(ret)
        return ret

    def keys(self) -> list[str]:
        return [i.key for i in self.entries if i.semantic]

    def get(self, key: str, default: str | None = None) -> str | None:
        if (e := self.entry(key)) is None:
            return default
        return e.value

    def __getitem__(self, key: str) -> str:
        if (e := self.entry(key)) is None:
            raise KeyError(key)
        return e.value

    def __contains__(self, key: object) -> bool:
        return any(i.key == key for i in self.entries)

    def __iter__(self) -> Iterator[IniEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return f'[{self.name}]'


class IniDocument:
    """一整个 INI 文件。

    ```ini
    ; 第一个小节之前的内容都进 self.header，原样保留。
    [section]
    key=a=b,c  ; 只按第一个 = 拆，行内注释也算在值里
    # 注释、空行、没有 = 的行也都留着，写回时一字不差。
    ```

    解析时不要求小节名唯一，但`add_section()`不允许重名；查找一律以第一个为准。
    """
    VALUE_SEPARATOR = VALUE_SEPARATOR

    def __init__(self, separator: str | None = None) -> None:
        self.header: list[str] = []
        self.sections: list[IniSection] = []
        self.separator = (
            self.VALUE_SEPARATOR if separator is None else separator)
        if not self.separator:
            raise ValueError('separator must not be empty.')

    def section(self, name: str) -> IniSection | None:
        for i in self.sections:
            if i.name == name:
                return i
        return None

    def __find(self, section: str, key: str) -> IniEntry:
        if (sect := self.section(section)) is None:
            raise SectionNotFoundError(section)
        if (ret := sect.entry(key)) is None:
            raise EntryNotFoundError(section, key)
        return ret

    def add_section(self, name: str) -> IniSection:
        if self.section(name) is not None:
            raise DuplicateSectionError(name)
        ret = IniSection(name)
        self.sections.append(ret)
        return ret

    def add_entry(self, section: str, key: str, value: str) -> IniEntry:
        """新增词条。同名键不会被覆盖，而是追加在小节末尾。"""
        if (sect := self.section(section)) is None:
            raise SectionNotFoundError(section)
        return sect.add(key, value)

    def modify_entry(self, section: str, key: str, value: str) -> IniEntry:
        ret = self.__find(section, key)
        ret.overwrite(value)
        return ret

    def append_entry(self, section: str, key: str, value: str) -> IniEntry:
        """以`self.separator`把`value`接到已有值后面。"""
        ret = self.__find(section, key)
        ret.append(value, self.separator)
        return ret

    def has_value(self, section: str, key: str, value: str) -> bool:
        """值表中是否有`value`。比较前会删掉每一项里所有的空格。

        小节或键不存在时只返回`False`。
        """
        if (sect := self.section(section)) is None:
            return False
        if (e := sect.entry(key)) is None:
            return False
        return any(
            i.replace(' ', '') == value
            for i in e.value.split(self.separator))

    def lines(self) -> Iterator[str]:
        """按写回顺序逐行生成文本（不含换行符）。"""
        yield from self.header
        for sect in self.sections:
            yield str(sect)
            for i in sect.entries:
                yield str(i)

    def __contains__(self, name: object) -> bool:
        return any(i.name == name for i in self.sections)

    def __iter__(self) -> Iterator[IniSection]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def __str__(self) -> str:
        return ''.join(f'{i}{NEWLINE}' for i in self.lines())

    def __repr__(self) -> str:
        return '<IniDocument { .header = %d, .sections = %d }>' % (
            len(self.header), len(self.sections))
