# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Queries answered by walking the lcp array: repeated substrings and
# distinct substring counts.
from sufarr.suffix_array import lcp_array, suffix_array

def arrays_for(seq, sa, lcp):
    if sa is None:
        sa = suffix_array(seq)
    if lcp is None:
        lcp = lcp_array(seq, sa)
    return sa, lcp

# Generate lcp intervals from the lcp array.
def lcp_intervals(lcp):
    heights = [0] + list(lcp) + [0]
    stack = [(0, 0)]
    for i in range(1, len(heights)):
        c = heights[i]
        lb = i - 1
        while c < stack[-1][0]:
            i_c, lb = stack.pop()
            yield i_c, lb, i - 1
        if c > stack[-1][0]:
            stack.append((c, lb))

def longest_repeated_substring(seq, sa = None, lcp = None):
    '''Returns (offset, length) of the longest substring occurring at
    least twice, overlaps allowed. (0, 0) if no symbol repeats.'''
    sa, lcp = arrays_for(seq, sa, lcp)
    if not lcp:
        return 0, 0
    best = max(lcp)
    if best == 0:
        return 0, 0
    return sa[lcp.index(best)], best

def count_distinct_substrings(seq, sa = None, lcp = None):
    sa, lcp = arrays_for(seq, sa, lcp)
    n = len(seq)
    return n * (n + 1) // 2 - sum(lcp)

def repeated_substrings(seq, min_len = 1):
    '''List of (substring, offsets) for every right-maximal repeat of
    at least min_len symbols, longest first.'''
    sa, lcp = arrays_for(seq, None, None)
    results = []
    for c, lb, rb in lcp_intervals(lcp):
        if c < min_len:
            continue
        i = sa[lb]
        results.append((seq[i : i + c], sorted(sa[lb : rb + 1])))
    return sorted(results, key = lambda r: (-len(r[0]), r[1][0]))
