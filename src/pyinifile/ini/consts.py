# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 22:05:41
# @Author : Kariko Lin

from re import compile as regex

# physical line limit, continuation marker included.
LINE_LENGTH = 75

COMMENT_MARK = '#'
COMMENT_PREFIX = '# '
CONTINUATION = '\\'
DELIMITER = '='

LAST_UPDATE_FORMAT = '# Last Update: %s'
LAST_UPDATE_PATTERN = regex(r'# Last Update: (.*)')
GROUP_PATTERN = regex(r'\[(.*)\]')

# value portion standing for an empty string (None is written as nothing).
EMPTY_MARKER = '""'

# forbidden anywhere in a key / group name.
KEY_FORBIDDEN = frozenset('\n\r\t=')
GROUP_FORBIDDEN = frozenset('\n\r\t]')
KEY_FORBIDDEN_PREFIXES = ('#', '[')
