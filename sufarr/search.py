# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Substring search with suffix arrays. Slicing gives a bounded
# comparison: a suffix shorter than the pattern compares as its
# available prefix.
from sufarr.suffix_array import InvalidSuffixArray
from sufarr.utils import SP

NOT_FOUND = -1

def check_length(seq, sa):
    if len(sa) != len(seq):
        fmt = 'Suffix array has %d entries but the text has %d symbols!'
        raise InvalidSuffixArray(fmt % (len(sa), len(seq)))

def search_pattern(seq, sa, pattern):
    '''Returns the offset of some occurrence of pattern in seq, not
    necessarily the leftmost one, or NOT_FOUND.'''
    check_length(seq, sa)
    m = len(pattern)
    lo, hi = 0, len(sa) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        i = sa[mid]
        prefix = seq[i : i + m]
        if prefix == pattern:
            return i
        if pattern < prefix:
            hi = mid - 1
        else:
            lo = mid + 1
    return NOT_FOUND

def find_range(seq, sa, pattern):
    '''Half-open range of sorted positions whose suffixes start with
    pattern. The range is empty if pattern doesn't occur.'''
    check_length(seq, sa)
    m = len(pattern)
    lo, hi = 0, len(sa)
    while lo < hi:  # like bisect.bisect_left
        mid = (lo + hi) // 2
        i = sa[mid]
        if seq[i : i + m] < pattern:
            lo = mid + 1
        else:
            hi = mid
    first = lo
    hi = len(sa)
    while lo < hi:  # like bisect.bisect_right
        mid = (lo + hi) // 2
        i = sa[mid]
        if pattern < seq[i : i + m]:
            hi = mid
        else:
            lo = mid + 1
    return first, lo

def find_all(seq, sa, pattern):
    lo, hi = find_range(seq, sa, pattern)
    SP.print('%d occurrences in sorted positions [%d, %d).',
             (hi - lo, lo, hi))
    return sorted(sa[lo:hi])

def count_occurrences(seq, sa, pattern):
    lo, hi = find_range(seq, sa, pattern)
    return hi - lo
