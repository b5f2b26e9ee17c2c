# -*- encoding: utf-8 -*-
# @File   : text.py
# @Time   : 2024/11/03 00:27:52
# @Author : Kariko Lin

"""Line-level helpers shared by the encoder and the parser.

A physical line ending with an *odd* number of backslashes is continued on
the next one. `break_string()` never cuts right behind an unpaired
backslash, so escaped backslashes (`\\\\`) won't be taken as markers.
"""

from datetime import datetime, timezone
from re import DOTALL
from re import compile as regex
from typing import Iterable

from .consts import (
    COMMENT_MARK,
    COMMENT_PREFIX,
    CONTINUATION,
    EMPTY_MARKER,
    LAST_UPDATE_PATTERN,
    LINE_LENGTH
)

_ESCAPES = {'\\': '\\\\', '\n': '\\n', '\r': '\\r', '\t': '\\t'}
_UNESCAPES = {
    '\\': '\\', 'n': '\n', 'r': '\r', 't': '\t',
    'b': '\b', 'f': '\f', '"': '"', "'": "'"
}
# `str.splitlines()` breaks on these as well.
_LINE_BREAKERS = frozenset('\x7f\x85\u2028\u2029')
_ESCAPE_SEQUENCE = regex(r'\\(u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|.)', DOTALL)
_LINE_BREAK = regex(r'\r\n?|\n')
# datetime keeps microseconds only.
_FRACTION = regex(r'(\.\d{6})\d+')


def _escape_char(ch: str) -> str:
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if ch < ' ' or ch in _LINE_BREAKERS:
        return '\\u%04x' % ord(ch)
    return ch


def escape(text: str, *, guard_edges: bool = False) -> str:
    """把文本转成可安全写入单行的形式。

    `guard_edges=True` 时，首尾空白也会转成`\\uXXXX`（解析时值会被 strip），
    开头的`"`转成`\\"`，以免与空串标记`""`混淆。
    """
    chars = [_escape_char(i) for i in text]
    if guard_edges:
        head = 0
        while head < len(text) and text[head].isspace():
            chars[head] = '\\u%04x' % ord(text[head])
            head += 1
        tail = len(text) - 1
        while tail >= head and text[tail].isspace():
            chars[tail] = '\\u%04x' % ord(text[tail])
            tail -= 1
        if text.startswith('"'):
            chars[0] = '\\"'
    return ''.join(chars)


def _unescape_match(m) -> str:
    seq: str = m[1]
    if len(seq) == 1:
        # unknown sequences are kept verbatim.
        return _UNESCAPES.get(seq, m[0])
    codepoint = int(seq[1:], 16)
    return chr(codepoint) if codepoint <= 0x10FFFF else m[0]


def unescape(text: str) -> str:
    return _ESCAPE_SEQUENCE.sub(_unescape_match, text)


def encode_value(value: str | None) -> str:
    if value is None:
        return ''
    if value == '':
        return EMPTY_MARKER
    return escape(value, guard_edges=True)


def decode_value(portion: str) -> str | None:
    """Inverse of `encode_value()`, fed with everything behind the `=`."""
    portion = portion.strip()
    if not portion:
        return None
    if portion == EMPTY_MARKER:
        return ''
    return unescape(portion)


def _backslash_run(text: str) -> int:
    return len(text) - len(text.rstrip(CONTINUATION))


def is_continued(line: str) -> bool:
    return _backslash_run(line) % 2 == 1


def break_string(
    text: str, width: int = LINE_LENGTH, indent: str = ''
) -> list[str]:
    """按`width`折行，除最后一行外均以`\\`结尾。

    续行以`indent`开头；各物理行（含`indent`与`\\`）均不超过`width`。
    """
    if width - len(indent) < 3:
        raise ValueError(f'width {width} too narrow for indent {indent!r}')
    ret = []
    head, remainder = '', text
    while len(head) + len(remainder) > width:
        cut = width - len(head) - 1
        if _backslash_run(remainder[:cut]) % 2:
            cut -= 1
        ret.append(f'{head}{remainder[:cut]}{CONTINUATION}')
        remainder = remainder[cut:]
        head = indent
    ret.append(head + remainder)
    return ret


def join_lines(lines: Iterable[str]) -> list[str]:
    """Merge continued physical lines into logical ones.

    A comment continuation repeats the `# ` prefix, which gets dropped here.
    """
    ret: list[str] = []
    buffer: str | None = None
    for line in lines:
        if (buffer is not None and buffer.startswith(COMMENT_MARK)
                and line.startswith(COMMENT_PREFIX)):
            line = line[len(COMMENT_PREFIX):]
        if is_continued(line):
            buffer = (buffer or '') + line[:-1]
        elif buffer is None:
            ret.append(line)
        else:
            ret.append(buffer + line)
            buffer = None
    # a dangling marker on the last line.
    if buffer is not None:
        ret.append(buffer)
    return ret


def split_lines(text: str) -> list[str]:
    lines = _LINE_BREAK.split(text)
    if lines[-1] == '':
        lines.pop()
    return lines


def split_comment(comment: str) -> list[str]:
    """Render a comment as `# ` lines, one paragraph per line break.

    Comment text is written verbatim, the parser never unescapes it.
    """
    ret: list[str] = []
    if not comment:
        return ret
    for paragraph in _LINE_BREAK.split(comment):
        line = f'{COMMENT_PREFIX}{paragraph.strip()}'.rstrip()
        if LAST_UPDATE_PATTERN.fullmatch(line):
            # an extra blank keeps it from being read as the marker.
            line = f'{COMMENT_PREFIX} {line[len(COMMENT_PREFIX):]}'
        if is_continued(line):
            line += ' '
        ret.extend(break_string(line, indent=COMMENT_PREFIX))
    return ret


def format_instant(instant: datetime) -> str:
    return instant.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


def parse_instant(text: str) -> datetime:
    """May raise `ValueError`."""
    ret = datetime.fromisoformat(_FRACTION.sub(r'\1', text.strip()))
    if ret.tzinfo is None:
        ret = ret.replace(tzinfo=timezone.utc)
    return ret.astimezone(timezone.utc)
