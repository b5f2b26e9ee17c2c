# -*- encoding: utf-8 -*-
# @File   : conftest.py
# @Time   : 2024/11/05 22:10:31
# @Author : Kariko Lin

from datetime import datetime, timezone

import pytest

FIXED_INSTANT = datetime(2024, 11, 3, 1, 12, 30, tzinfo=timezone.utc)
FIXED_STAMP = '2024-11-03T01:12:30Z'


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_INSTANT


@pytest.fixture
def ini_path(tmp_path):
    return tmp_path / 'test.ini'


@pytest.fixture
def fixed_stamp():
    return FIXED_STAMP
