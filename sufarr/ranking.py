# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Rank records for prefix doubling. Each suffix gets a pair (rank0,
# rank1) where rank0 numbers the equivalence class of its prefix of
# half the current width and rank1 the class of the prefix starting
# half a width later, or -1 past the end of the text.
from collections import namedtuple

import numpy as np

SENTINEL = -1

RankRecords = namedtuple('RankRecords',
                         ['order', 'rank0', 'rank1', 'width'])

def ordinals(seq):
    '''Integer codes for the symbols of seq such that comparing codes
    is the same as comparing symbols.'''
    if isinstance(seq, str):
        return np.array([ord(ch) for ch in seq], dtype = np.int64)
    if isinstance(seq, (bytes, bytearray)):
        return np.array(list(seq), dtype = np.int64)
    vocab = sorted(set(seq))
    ch2idx = {ch: i for i, ch in enumerate(vocab)}
    return np.array([ch2idx[t] for t in seq], dtype = np.int64)

def shifted(rank, n):
    '''The rank n positions later, SENTINEL past the end.'''
    rank1 = np.full(len(rank), SENTINEL, dtype = np.int64)
    if n < len(rank):
        rank1[:len(rank) - n] = rank[n:]
    return rank1

def sort_by_ranks(rank0, rank1):
    # lexsort sorts on the last key first and is stable so equal pairs
    # stay in offset order.
    return np.lexsort((rank1, rank0))

def seed_ranks(codes):
    '''Ranks of every suffix by its first two symbols.'''
    rank0 = np.asarray(codes, dtype = np.int64)
    rank1 = shifted(rank0, 1)
    order = sort_by_ranks(rank0, rank1)
    return RankRecords(order, rank0, rank1, 2)

def dense_ranks(records):
    '''Number the equivalence classes of the current order. Indexed by
    offset, so it also serves as the rank-at-offset map.'''
    order = records.order
    r0 = records.rank0[order]
    r1 = records.rank1[order]
    changes = np.logical_or(np.diff(r0), np.diff(r1))
    rank = np.empty(len(order), dtype = np.int64)
    if len(order):
        rank[order[0]] = 0
        rank[order[1:]] = np.cumsum(changes)
    return rank

def n_classes(records):
    if not len(records.order):
        return 0
    return int(dense_ranks(records).max()) + 1

def refine_ranks(records):
    '''One doubling step: turns ranks for prefixes of length width into
    ranks for prefixes of length 2 * width.'''
    width = records.width * 2
    rank0 = dense_ranks(records)
    rank1 = shifted(rank0, width // 2)
    order = sort_by_ranks(rank0, rank1)
    return RankRecords(order, rank0, rank1, width)
