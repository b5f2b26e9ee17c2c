# -*- encoding: utf-8 -*-
# @File   : converters.py
# @Time   : 2024/11/04 20:51:06
# @Author : Kariko Lin

"""A few ready-made `StringConverter`s. `None` always maps to `None`."""

from datetime import datetime
from pathlib import Path

from .abstract import StringConverter
from .ini.text import format_instant, parse_instant


class IntConverter(StringConverter[int]):
    def to_string(self, value: int | None) -> str | None:
        return None if value is None else str(value)

    def from_string(self, text: str | None) -> int | None:
        return None if text is None else int(text)


class FloatConverter(StringConverter[float]):
    def to_string(self, value: float | None) -> str | None:
        return None if value is None else repr(float(value))

    def from_string(self, text: str | None) -> float | None:
        return None if text is None else float(text)


class BoolConverter(StringConverter[bool]):
    def to_string(self, value: bool | None) -> str | None:
        return None if value is None else ('true' if value else 'false')

    # lazy to support anything fancier, just like the old `getbool()`.
    def from_string(self, text: str | None) -> bool | None:
        if text is None:
            return None
        text = text.strip().lower()
        return text == 'on' or (bool(text) and text[0] in ('1', 'y', 't'))


class DateTimeConverter(StringConverter[datetime]):
    """ISO-8601, normalized to UTC, the same as `# Last Update:`."""

    def to_string(self, value: datetime | None) -> str | None:
        return None if value is None else format_instant(value)

    def from_string(self, text: str | None) -> datetime | None:
        return None if text is None else parse_instant(text)


class PathConverter(StringConverter[Path]):
    def to_string(self, value: Path | None) -> str | None:
        return None if value is None else str(value)

    def from_string(self, text: str | None) -> Path | None:
        return None if text is None else Path(text)
