# -*- encoding: utf-8 -*-
# @File   : document.py
# @Time   : 2024/11/03 16:02:47
# @Author : Kariko Lin

"""The INI document: parsing, encoding and the public read/write API.

Nothing is persisted until `save()` gets called.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from os import PathLike
from pathlib import Path
from typing import Any, Iterator
from warnings import warn

from ..abstract import IniAccessor, StringConverter
from .consts import (
    COMMENT_MARK,
    DELIMITER,
    GROUP_PATTERN,
    LAST_UPDATE_FORMAT,
    LAST_UPDATE_PATTERN
)
from .errors import IniValidationError, InvalidIniStructure, NullArgumentError
from .model import Collator, IniEntry, IniGroup, check_group_name, check_key
from .parser import IniFileHandler
from .text import (
    decode_value,
    format_instant,
    join_lines,
    parse_instant,
    split_comment,
    split_lines
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IniFile(IniAccessor, Mapping[str, IniGroup]):
    """INI 文件（文档）本体。

    作为只读字典使用时，按小节创建顺序迭代小节名，取值得到`IniGroup`。
    """

    def __init__(
        self, path: str | PathLike[str], *,
        clock: Clock | None = None,
        collator: Collator | None = None,
        encoding: str = 'utf-8'
    ) -> None:
        if path is None:
            raise NullArgumentError('path')
        self._handler = IniFileHandler(path, encoding)
        self._clock: Clock = clock or _utcnow
        self._collator = collator
        self._comment = ''
        self._groups: dict[str, IniGroup] = {}
        self._last_updated = self._clock()

    # factories

    @classmethod
    def create(cls, path: str | PathLike[str], **options: Any) -> 'IniFile':
        """新建空文档。文件只在`save()`时写入，已存在的同名文件会被直接覆盖。"""
        return cls(path, **options)

    @classmethod
    def open(cls, path: str | PathLike[str], **options: Any) -> 'IniFile':
        """读取指定文件；文件不存在则得到空文档（`save()`时再创建）。

        Raises:
            InvalidIniStructure: 文件内容不符合 INI 结构。
            OSError: 读取失败。
        """
        ret = cls(path, **options)
        ret._load()
        return ret

    # properties

    @property
    def path(self) -> Path:
        return self._handler.path

    @property
    def comment(self) -> str:
        return self._comment

    @property
    def last_updated(self) -> datetime:
        return self._last_updated

    @property
    def clock(self) -> Clock:
        return self._clock

    @clock.setter
    def clock(self, clock: Clock) -> None:
        self._clock = clock

    # mapping protocol

    def __getitem__(self, group: str) -> IniGroup:
        return self._groups[group]

    def __contains__(self, group: object) -> bool:
        return self.has_group(group)

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    # persistence

    def _load(self) -> None:
        if not self._handler.exists():
            logger.debug('%s does not exist yet, starting empty.', self.path)
            self.parse([])
            return
        self.parse(join_lines(split_lines(self._handler.read())))

    def refresh(self) -> None:
        """按文件内容重建整个文档，丢弃所有未保存的修改。"""
        self._load()

    def save(self) -> None:
        self._last_updated = self._clock()
        contents = self.dump_contents()
        self._handler.write(contents)
        logger.info('Saved %s (%d chars).', self.path, len(contents))

    def dump_contents(self) -> str:
        lines = split_comment(self._comment)
        lines.append(LAST_UPDATE_FORMAT % format_instant(self._last_updated))
        return '\n'.join(lines) + '\n' + ''.join(
            str(i) for i in self._groups.values())

    def _new_group(self, name: str) -> IniGroup:
        return IniGroup(name, self._collator)

    def parse(self, lines: Iterable[str]) -> None:
        """解析已合并续行的逻辑行，替换当前全部内容。

        解析失败时文档保持原样。

        Raises:
            InvalidIniStructure: 键值对出现在任何小节之前，或缺少`=`。
        """
        groups: dict[str, IniGroup] = {}
        last_updated = self._clock()
        root: list[str] = []
        pending: list[str] = []
        buffered = False
        this_group: IniGroup | None = None
        for lineno, line in enumerate(lines, 1):
            if m := LAST_UPDATE_PATTERN.fullmatch(line):
                try:
                    last_updated = parse_instant(m[1])
                except ValueError as e:
                    raise InvalidIniStructure(
                        self.path, lineno, 'bad timestamp') from e
                continue

            if line.startswith(COMMENT_MARK):
                (pending if buffered else root).append(line[1:].strip())
                continue

            if m := GROUP_PATTERN.fullmatch(line.strip()):
                name = m[1]
                if name in groups:
                    warn(f'[{name}] 在 {self.path} 中重复出现，仅保留最后一个。')
                try:
                    this_group = self._new_group(name)
                except IniValidationError as e:
                    raise InvalidIniStructure(
                        self.path, lineno, 'bad group name') from e
                groups[name] = this_group
                this_group.add_comment('\n'.join(pending))
                pending.clear()
                continue

            if not line.strip():
                buffered = True
                continue

            if this_group is None:
                raise InvalidIniStructure(self.path, lineno, 'no group')
            pos = line.find(DELIMITER)
            key = line[:pos].strip()
            if pos < 1 or not key:
                raise InvalidIniStructure(self.path, lineno, 'no key')
            try:
                value = this_group.set_value(key, decode_value(line[pos + 1:]))
            except IniValidationError as e:
                raise InvalidIniStructure(
                    self.path, lineno, 'bad key') from e
            value.add_comment('\n'.join(pending))
            pending.clear()

        if pending:
            logger.debug('Dropped %d dangling comment line(s).', len(pending))
        self._groups = groups
        self._comment = '\n'.join(root)
        self._last_updated = last_updated
        logger.debug('Parsed %d group(s) from %s.', len(groups), self.path)

    # comments

    def add_comment(
        self, comment: str | None,
        group: str | None = None, key: str | None = None
    ) -> None:
        """追加注释：不给`group`即文件注释；给`key`则是该键值对的注释。

        每次追加都另起一段；空白注释会被忽略。
        """
        if group is None:
            if key is not None:
                raise NullArgumentError('group')
            if comment is not None and comment.strip():
                self._comment = (
                    f'{self._comment}\n{comment}' if self._comment else comment)
            return
        check_group_name(group)
        if key is not None:
            check_key(key)
        if comment is not None and comment.strip():
            self._setdefault(group).add_comment(comment, key)

    def set_comment(
        self, comment: str | None,
        group: str | None = None, key: str | None = None
    ) -> None:
        """替换注释；传入`None`或空白即清空。"""
        if group is None:
            if key is not None:
                raise NullArgumentError('group')
            self._comment = ''
            self.add_comment(comment)
            return
        check_group_name(group)
        if key is not None:
            check_key(key)
        if group in self._groups or (comment is not None and comment.strip()):
            self._setdefault(group).set_comment(comment, key)

    # values

    def _setdefault(self, group: str) -> IniGroup:
        if group not in self._groups:
            self._groups[group] = self._new_group(group)
        return self._groups[group]

    def get_value(
        self, group: str, key: str, default: Any = None, *,
        converter: StringConverter[Any] | None = None
    ) -> Any:
        """取值。小节或键不存在（甚至名字不合法）时都返回`default`，不抛异常。

        值为`None`时同样返回`default`；给了`converter`则先转换再返回。
        """
        if not isinstance(group, str) or not isinstance(key, str):
            return default
        this_group = self._groups.get(group)
        value = None if this_group is None else this_group.lookup(key)
        if value is None or value.value is None:
            return default
        if converter is None:
            return value.value
        return converter.from_string(value.value)

    def set_value(
        self, group: str, key: str, value: Any, *,
        converter: StringConverter[Any] | None = None
    ) -> None:
        """设置值（`None`表示“无值”）；小节不存在则新建。"""
        if converter is not None:
            value = converter.to_string(value)
        check_group_name(group)
        check_key(key)
        self._setdefault(group).set_value(key, value)

    def has_group(self, group: object) -> bool:
        return (isinstance(group, str) and bool(group.strip())
                and group in self._groups)

    def has_value(self, group: object, key: object) -> bool:
        """键存在即为真，哪怕值是`None`。"""
        return (self.has_group(group) and isinstance(key, str)
                and key in self._groups[group])  # type: ignore[index]

    def list_entries(self) -> list[IniEntry]:
        """按小节名、键名排序的全部键值对。"""
        collate = self._collator or (lambda x: x)
        ret = [
            IniEntry(name, key, value)
            for name, this_group in self._groups.items()
            for key, value in this_group.items()
        ]
        ret.sort(key=lambda x: (collate(x.group), collate(x.key)))
        return ret

    def __str__(self) -> str:
        return self.dump_contents()

    def __repr__(self) -> str:
        return f'<IniFile {self.path} {{ .groups = {len(self)} }}>'
