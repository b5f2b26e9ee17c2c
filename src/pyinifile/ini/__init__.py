# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 16:40:15
# @Author : Kariko Lin

from .consts import LINE_LENGTH
from .document import IniFile
from .errors import (
    IniError,
    IniValidationError,
    NullArgumentError,
    EmptyArgumentError,
    BlankArgumentError,
    MalformedArgumentError,
    InvalidIniStructure
)
from .model import IniEntry, IniGroup, IniValue, is_valid_group_name, is_valid_key
from .parser import IniFileHandler
