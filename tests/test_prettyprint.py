# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from sufarr.prettyprint import (lcp_array_to_string,
                                lcp_rows,
                                suffix_array_to_string,
                                suffix_rows,
                                truncate)
from sufarr.suffix_array import lcp_array, suffix_array

def test_truncate():
    assert truncate('banana', 3) == 'ban...'
    assert truncate('banana', 6) == 'banana'
    assert truncate('banana', None) == 'banana'
    assert truncate(b'ab', 1) == 'a...'
    assert truncate([1, 2, 3], 2) == '1 2...'

def test_suffix_rows():
    seq = 'banana'
    rows = suffix_rows(seq, suffix_array(seq), 4)
    assert rows[0] == (0, 5, 'a')
    assert rows[2] == (2, 1, 'anan...')
    assert rows[5] == (5, 2, 'nana')

def test_lcp_rows():
    lcp = lcp_array('banana', suffix_array('banana'))
    assert lcp_rows(lcp) == [('lcp[0]', 1), ('lcp[1]', 3), ('lcp[2]', 0),
                             ('lcp[3]', 0), ('lcp[4]', 2)]

def test_to_string():
    seq = 'banana'
    sa = suffix_array(seq)
    s = suffix_array_to_string(seq, sa)
    for suffix in ['a', 'ana', 'anana', 'banana', 'na', 'nana']:
        assert suffix in s
    assert 'Suffix' in s
    s = lcp_array_to_string(lcp_array(seq, sa))
    assert 'lcp[4]' in s
    assert suffix_array_to_string('', []) == ''
    assert lcp_array_to_string([]) == ''
