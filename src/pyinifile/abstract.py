# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/11/02 21:40:13
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from collections.abc import Iterable
from os import PathLike
from typing import Any


class FileHandler[T](metaclass=ABCMeta):
    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return str(self._fn)


class StringConverter[T](metaclass=ABCMeta):
    """字符串与任意类型之间的互转。

    `None` 应原样映射为 `None`，INI 文档借此区分“无值”与空串。
    """

    @abstractmethod
    def to_string(self, value: T | None) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def from_string(self, text: str | None) -> T | None:
        raise NotImplementedError


class IniAccessor(metaclass=ABCMeta):
    """Windows 风格 INI 文件的读写接口。

    注：所有修改都只发生在内存里，需显式调用`save()`才会落盘。
    """

    @abstractmethod
    def add_comment(
        self, comment: str | None,
        group: str | None = None, key: str | None = None
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_comment(
        self, comment: str | None,
        group: str | None = None, key: str | None = None
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_value(
        self, group: str, key: str, default: Any = None, *,
        converter: StringConverter[Any] | None = None
    ) -> Any:
        raise NotImplementedError

    @abstractmethod
    def set_value(
        self, group: str, key: str, value: Any, *,
        converter: StringConverter[Any] | None = None
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def has_group(self, group: object) -> bool:
        raise NotImplementedError

    @abstractmethod
    def has_value(self, group: object, key: object) -> bool:
        raise NotImplementedError

    @abstractmethod
    def list_entries(self) -> list[Any]:
        raise NotImplementedError

    @abstractmethod
    def refresh(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def save(self) -> None:
        raise NotImplementedError

    def load_entries(self, entries: Iterable[tuple[str, str, str | None]]) -> None:
        """批量写入`(group, key, value)`三元组（`IniEntry`亦可）。"""
        for group, key, value in entries:
            self.set_value(group, key, value)
