# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from random import Random
from sufarr.repeats import (count_distinct_substrings,
                            lcp_intervals,
                            longest_repeated_substring,
                            repeated_substrings)
from sufarr.suffix_array import lcp_array, suffix_array

def test_longest_repeated_substring():
    examples = [
        ('', (0, 0)),
        ('abc', (0, 0)),
        ('banana', (3, 3)),
        ('aaaa', (1, 3)),
        ('mississippi', (4, 4))
    ]
    for seq, best in examples:
        assert longest_repeated_substring(seq) == best

def test_longest_repeated_substring_precomputed():
    seq = 'abcabxabcd'
    sa = suffix_array(seq)
    lcp = lcp_array(seq, sa)
    ofs, n = longest_repeated_substring(seq, sa, lcp)
    assert seq[ofs : ofs + n] == 'abc'

def test_count_distinct_substrings():
    rnd = Random(7)
    examples = ['', 'a', 'banana', 'aaaa', 'abcd']
    examples += [''.join(rnd.choice('ab') for _ in range(rnd.randrange(20)))
                 for _ in range(50)]
    for seq in examples:
        n = len(seq)
        brute = {seq[i:j] for i in range(n) for j in range(i + 1, n + 1)}
        assert count_distinct_substrings(seq) == len(brute)

def test_lcp_intervals():
    lcp = lcp_array('banana', suffix_array('banana'))
    intervals = sorted(lcp_intervals(lcp))
    assert intervals == [(1, 0, 2), (2, 4, 5), (3, 1, 2)]
    assert list(lcp_intervals([])) == []
    assert list(lcp_intervals([0, 0])) == []

def test_repeated_substrings():
    assert repeated_substrings('banana') == [
        ('ana', [1, 3]),
        ('na', [2, 4]),
        ('a', [1, 3, 5])
    ]
    assert repeated_substrings('banana', 2) == [
        ('ana', [1, 3]),
        ('na', [2, 4])
    ]
    assert repeated_substrings('abc') == []
