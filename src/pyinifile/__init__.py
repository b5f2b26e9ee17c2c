# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 16:44:02
# @Author : Kariko Lin

import logging

from .abstract import FileHandler, IniAccessor, StringConverter
from .ini import (
    LINE_LENGTH,
    IniFile, IniGroup, IniValue, IniEntry, IniFileHandler,
    IniError, IniValidationError, InvalidIniStructure,
    NullArgumentError, EmptyArgumentError,
    BlankArgumentError, MalformedArgumentError,
    is_valid_group_name, is_valid_key
)

__all__ = [
    'LINE_LENGTH',
    'FileHandler', 'IniAccessor', 'StringConverter',
    'IniFile', 'IniGroup', 'IniValue', 'IniEntry', 'IniFileHandler',
    'IniError', 'IniValidationError', 'InvalidIniStructure',
    'NullArgumentError', 'EmptyArgumentError',
    'BlankArgumentError', 'MalformedArgumentError',
    'is_valid_group_name', 'is_valid_key'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
