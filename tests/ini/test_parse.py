# -*- encoding: utf-8 -*-
# @File   : test_parse.py
# @Time   : 2024/11/06 00:03:27
# @Author : Kariko Lin

from datetime import datetime, timezone

import pytest

from pyinifile import IniFile, InvalidIniStructure

SAMPLE = (
    '# A test file for the configuration.\n'
    '# Last Update: 2021-05-01T19:29:37.779194Z\n'
    '\n'
    '# The Global parameters.\n'
    '[Global]\n'
    '\n'
    '# Variable Number 1\n'
    'var1 = value1\n'
)


@pytest.fixture
def candidate(ini_path, fixed_clock):
    return IniFile.create(ini_path, clock=fixed_clock)


def test_parse_then_dump(candidate):
    candidate.parse(SAMPLE.splitlines())
    assert candidate.comment == 'A test file for the configuration.'
    assert candidate.last_updated == datetime(
        2021, 5, 1, 19, 29, 37, 779194, tzinfo=timezone.utc)
    assert candidate['Global'].comment == 'The Global parameters.'
    assert candidate['Global'].lookup('var1').comment == 'Variable Number 1'
    assert candidate.get_value('Global', 'var1') == 'value1'
    assert candidate.dump_contents() == SAMPLE


def test_parse_resets_state(candidate):
    candidate.set_value('old', 'key', 'value')
    candidate.add_comment('old comment')
    candidate.parse(['[new]', 'key = value'])
    assert list(candidate) == ['new']
    assert candidate.comment == ''


@pytest.mark.parametrize('lines', [
    ['key = value'],
    ['# comment', '', 'key = value', '[group]'],
    ['[group]', '= value'],
    ['[group]', '   = value'],
    ['[group]', 'no separator'],
    ['[group]', '[bad = 1'],
    ['[bad]name]'],
    ['# Last Update: yesterday'],
])
def test_invalid_structure(candidate, ini_path, lines):
    with pytest.raises(InvalidIniStructure) as e:
        candidate.parse(lines)
    assert 'has invalid structure' in str(e.value)
    assert str(ini_path) in str(e.value)


def test_key_and_value_are_trimmed(candidate):
    candidate.parse(['[g]', '  key   =   some value  ', 'eq = a=b'])
    assert candidate.get_value('g', 'key') == 'some value'
    assert candidate.get_value('g', 'eq') == 'a=b'


def test_null_and_empty_values(candidate):
    candidate.parse(['[g]', 'none = ', 'bare =', 'empty = ""', 'quoted = \\""'])
    assert candidate.has_value('g', 'none')
    assert candidate.get_value('g', 'none') is None
    assert candidate.get_value('g', 'bare') is None
    assert candidate.get_value('g', 'empty') == ''
    assert candidate.get_value('g', 'quoted') == '""'


def test_escapes_are_decoded(candidate):
    candidate.parse(['[g]', 'k = line1\\nline2\\ttab\\\\'])
    assert candidate.get_value('g', 'k') == 'line1\nline2\ttab\\'


def test_comment_buffering(candidate):
    candidate.parse([
        '# file comment',
        '# more file comment',
        '',
        '# group comment',
        '[g]',
        'a = 1',
        '',
        '# first paragraph',
        '#',
        '# second paragraph',
        'b = 2',
        '# trailing, dropped',
    ])
    assert candidate.comment == 'file comment\nmore file comment'
    assert candidate['g'].comment == 'group comment'
    assert candidate['g'].lookup('a').comment == ''
    assert candidate['g'].lookup('b').comment == (
        'first paragraph\n\nsecond paragraph')


def test_comments_before_first_blank_belong_to_file(candidate):
    candidate.parse(['[g]', '# no blank line seen yet', 'k = v'])
    assert candidate.comment == 'no blank line seen yet'
    assert candidate['g'].lookup('k').comment == ''


def test_duplicate_group_last_one_wins(candidate):
    with pytest.warns(UserWarning):
        candidate.parse(['[g]', 'a = 1', '[h]', '[g]', 'b = 2'])
    assert list(candidate) == ['g', 'h']
    assert dict(candidate['g']) == {'b': '2'}


def test_missing_marker_keeps_clock(candidate, fixed_clock):
    candidate.parse(['[g]'])
    assert candidate.last_updated == fixed_clock()


def test_comments_are_verbatim(candidate):
    candidate.parse([
        '# data in C:\\new\\table',
        '',
        '# \\u0041 stays',
        '[g]',
    ])
    assert candidate.comment == 'data in C:\\new\\table'
    assert candidate['g'].comment == '\\u0041 stays'


@pytest.mark.parametrize('lines', [
    ['# other', '', '[g]', 'k = v2', 'broken line'],
    ['[h]', 'k = v', '# Last Update: yesterday'],
])
def test_failed_parse_keeps_document(candidate, lines):
    candidate.add_comment('root')
    candidate.set_value('g', 'k', 'v')
    stamp = candidate.last_updated
    with pytest.raises(InvalidIniStructure):
        candidate.parse(lines)
    assert candidate.comment == 'root'
    assert list(candidate) == ['g']
    assert candidate.get_value('g', 'k') == 'v'
    assert candidate.last_updated == stamp
