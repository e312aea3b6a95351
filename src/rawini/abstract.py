# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/21 22:10:41
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """读写*一个*文件的处理器基类。

    子类只负责把文件内容和文档对象互相转换，
    打开、编码之类的事情由子类自行决定。
    """
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
