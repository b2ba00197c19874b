# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Suffix arrays by prefix doubling and LCP arrays by Kasai's
# algorithm.
from sufarr.ranking import n_classes, ordinals, refine_ranks, seed_ranks
from sufarr.utils import SP

class InvalidSuffixArray(ValueError):
    pass

def suffix_array(seq):
    n = len(seq)
    if not n:
        return []
    SP.header('SUFFIX ARRAY', 'for %d symbols', n)
    records = seed_ranks(ordinals(seq))
    k = 4
    while k < 2 * n:
        records = refine_ranks(records)
        SP.print('Width %d, %d rank classes.', (k, n_classes(records)))
        k *= 2
    SP.leave()
    return records.order.tolist()

def check_suffix_array(seq, sa):
    n = len(seq)
    if len(sa) != n:
        fmt = 'Suffix array has %d entries but the text has %d symbols!'
        raise InvalidSuffixArray(fmt % (len(sa), n))
    seen = [False] * n
    for ofs in sa:
        if not 0 <= ofs < n or seen[ofs]:
            fmt = 'Suffix array is not a permutation of [0, %d)!'
            raise InvalidSuffixArray(fmt % n)
        seen[ofs] = True

def rank_array(sa):
    '''Inverse of the suffix array: rank[sa[i]] == i.'''
    rank = [0] * len(sa)
    for i, ofs in enumerate(sa):
        rank[ofs] = i
    return rank

def lcp_array(seq, sa):
    '''Entry p is the length of the longest common prefix of the
    suffixes at sorted positions p and p + 1.'''
    check_suffix_array(seq, sa)
    n = len(sa)
    if n < 2:
        return []
    lcp = [0] * (n - 1)
    rank = rank_array(sa)
    k = 0
    for i, rank_el in enumerate(rank):
        if rank_el == n - 1:
            k = 0
            continue
        j = sa[rank_el + 1]
        while i + k < n and j + k < n and seq[i + k] == seq[j + k]:
            k += 1
        lcp[rank_el] = k
        if k > 0:
            k -= 1
    return lcp
