# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/03 01:12:30
# @Author : Kariko Lin

"""
INI 结构：小节（`IniGroup`）与键值对（`IniValue`）。

与 C&C INI 不同，这里的 INI 带注释与折行：

    ```ini
    # 文件注释
    # Last Update: 2024-11-03T01:12:30Z

    # 小节注释
    [group]

    # 键值对注释
    key = value
    ```

小节按创建顺序保存，小节内的键值对则始终按键排序输出。
"""

from collections.abc import Callable, Mapping
from typing import Any, Iterator, NamedTuple

from ..abstract import StringConverter
from .consts import (
    GROUP_FORBIDDEN,
    KEY_FORBIDDEN,
    KEY_FORBIDDEN_PREFIXES
)
from .errors import (
    BlankArgumentError,
    EmptyArgumentError,
    IniValidationError,
    MalformedArgumentError,
    NullArgumentError
)
from .text import break_string, encode_value, split_comment

Collator = Callable[[str], Any]


def _require_text(candidate: object, argument: str) -> str:
    if candidate is None:
        raise NullArgumentError(argument)
    if not isinstance(candidate, str):
        raise MalformedArgumentError(argument, candidate)
    if candidate == '':
        raise EmptyArgumentError(argument)
    if candidate.isspace():
        raise BlankArgumentError(argument)
    return candidate


def check_key(candidate: object, argument: str = 'key') -> str:
    """校验键名，不合法则抛出对应的`IniValidationError`子类。"""
    key = _require_text(candidate, argument)
    # keys are trimmed on parse.
    if (key != key.strip() or any(i in KEY_FORBIDDEN for i in key)
            or key.startswith(KEY_FORBIDDEN_PREFIXES)):
        raise MalformedArgumentError(argument, key)
    return key


def check_group_name(candidate: object, argument: str = 'group') -> str:
    name = _require_text(candidate, argument)
    if any(i in GROUP_FORBIDDEN for i in name):
        raise MalformedArgumentError(argument, name)
    return name


def is_valid_key(candidate: object) -> bool:
    try:
        check_key(candidate)
    except IniValidationError:
        return False
    return True


def is_valid_group_name(candidate: object) -> bool:
    try:
        check_group_name(candidate)
    except IniValidationError:
        return False
    return True


def _append(buffer: str, comment: str | None) -> str:
    if comment is None or not comment.strip():
        return buffer
    return f'{buffer}\n{comment}' if buffer else comment


class IniValue:
    """一个键值对。值可以是`None`（与空串不同）。"""

    def __init__(
        self, group: 'IniGroup', key: str, value: str | None = None
    ) -> None:
        self._group = group
        self._key = check_key(key)
        self._value = value
        self._comment = ''

    @property
    def group(self) -> 'IniGroup':
        return self._group

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> str | None:
        return self._value

    @property
    def comment(self) -> str:
        return self._comment

    def set_value(self, value: str | None) -> None:
        self._value = value

    def add_comment(self, comment: str | None) -> None:
        """追加注释（另起一段）。空白注释会被忽略。"""
        self._comment = _append(self._comment, comment)

    def set_comment(self, comment: str | None) -> None:
        self._comment = _append('', comment)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniValue):
            return NotImplemented
        # compare group names only, groups hold values in turn.
        return (self._group.name == other._group.name
                and self._key == other._key
                and self._value == other._value
                and self._comment == other._comment)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        lines = []
        if self._comment:
            lines.append('')
            lines.extend(split_comment(self._comment))
        lines.extend(break_string(
            f'{self._key} = {encode_value(self._value)}'))
        return '\n'.join(lines) + '\n'

    def __repr__(self) -> str:
        return f'{self._key} = {self._value!r}'


class IniGroup(Mapping[str, str | None]):
    """INI 小节。作为只读字典使用时，按键的顺序迭代，得到的是值本身。

    增改请用`set_value()`；本设计不提供删除键值对。
    """

    def __init__(self, name: str, collator: Collator | None = None) -> None:
        self._name = check_group_name(name, 'name')
        self._collator = collator
        self._comment = ''
        self._values: dict[str, IniValue] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def comment(self) -> str:
        return self._comment

    def __getitem__(self, key: str) -> str | None:
        return self._values[key].value

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._values, key=self._collator))

    def __len__(self) -> int:
        return len(self._values)

    def _setdefault(self, key: str) -> IniValue:
        if key not in self._values:
            self._values[key] = IniValue(self, key)
        return self._values[key]

    def lookup(self, key: str) -> IniValue | None:
        return self._values.get(key)

    def set_value(self, key: str, value: str | None) -> IniValue:
        """设置（或新建）键值对，并返回该`IniValue`。"""
        ret = self._setdefault(check_key(key))
        ret.set_value(value)
        return ret

    def add_comment(
        self, comment: str | None, key: str | None = None
    ) -> None:
        """不给`key`则追加到小节本身的注释。"""
        if key is None:
            self._comment = _append(self._comment, comment)
            return
        check_key(key)
        if comment is not None and comment.strip():
            self._setdefault(key).add_comment(comment)

    def set_comment(
        self, comment: str | None, key: str | None = None
    ) -> None:
        if key is None:
            self._comment = _append('', comment)
            return
        check_key(key)
        if key in self._values or (comment is not None and comment.strip()):
            self._setdefault(key).set_comment(comment)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniGroup):
            return NotImplemented
        return (self._name == other._name
                and self._comment == other._comment
                and self._values == other._values)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        lines = ['']
        if self._comment:
            lines.extend(split_comment(self._comment))
        lines.extend(break_string(f'[{self._name}]'))
        return '\n'.join(lines) + '\n' + ''.join(
            str(self._values[k]) for k in self)

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._values))


class IniEntry(NamedTuple):
    """Only for listing."""
    group: str
    key: str
    value: str | None

    def typed_value[T](self, converter: StringConverter[T]) -> T | None:
        return converter.from_string(self.value)

    def __str__(self) -> str:
        return f'{self.group}/{self.key} = {self.value}'
