# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/03 14:36:20
# @Author : Kariko Lin

"""File access for `IniFile`. Text in, text out.

The structural work (joining lines, parsing, encoding) lives in
`document.py`; this module only decodes and persists.
"""

import logging
import os
import shutil
import tempfile
from os import PathLike
from pathlib import Path

import chardet

from ..abstract import FileHandler

logger = logging.getLogger(__name__)


class IniFileHandler(FileHandler[str]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(Path(filename))
        self._codec = encoding

    @property
    def path(self) -> Path:
        return Path(self._fn)

    @property
    def encoding(self) -> str:
        return self._codec

    def exists(self) -> bool:
        return self.path.exists()

    @staticmethod
    def _decode_file(filename: Path, expected: str) -> str:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        guess = chardet.detect(raw)
        codec = guess['encoding']
        if not codec or guess['confidence'] < 0.8:
            codec = 'utf-8'

        # fallbacks
        try:
            text = raw.decode(codec)
        except (UnicodeDecodeError, LookupError):
            codec = 'latin-1'
            text = raw.decode(codec)
        logger.warning(
            '%s is not valid %s, decoded as %s instead.',
            filename, expected, codec)
        return text

    def read(self) -> str:
        """读取整个文件。文件不存在时抛出`FileNotFoundError`。"""
        try:
            # newline=None: '\r\n' and '\r' come in as '\n'.
            with open(self.path, 'r', encoding=self._codec) as fp:
                return fp.read()
        except UnicodeDecodeError:
            return self._decode_file(self.path, self._codec)

    def write(self, instance: str) -> None:
        """原子地覆盖写入：先写临时文件，再`os.replace()`。

        目标所在的文件夹不存在时会被递归创建。
        """
        target = self.path
        folder = target.parent
        folder.mkdir(parents=True, exist_ok=True)

        fd, tmp = tempfile.mkstemp(
            prefix=f'.{target.name}.', suffix='.tmp', dir=folder)
        try:
            with os.fdopen(fd, 'w', encoding=self._codec, newline='\n') as fp:
                fp.write(instance)
                fp.flush()
                os.fsync(fp.fileno())
            if target.exists():
                shutil.copymode(target, tmp)
            os.replace(tmp, target)
        except BaseException:
            # fd is closed by fdopen() even if the write failed.
            if os.path.exists(tmp):
                os.remove(tmp)
            raise

    def __str__(self) -> str:
        return f'INI file: {super().__str__()} ({self._codec})'
