# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Prettyprint suffix and lcp arrays.
from sufarr.utils import term_table_string

def symbols_to_string(symbols):
    if isinstance(symbols, str):
        return symbols
    if isinstance(symbols, (bytes, bytearray)):
        return bytes(symbols).decode('latin-1')
    return ' '.join(map(str, symbols))

def truncate(symbols, limit):
    if limit is not None and len(symbols) > limit:
        return symbols_to_string(symbols[:limit]) + '...'
    return symbols_to_string(symbols)

def suffix_rows(seq, sa, limit = 40):
    return [(p, ofs, truncate(seq[ofs:], limit))
            for p, ofs in enumerate(sa)]

def lcp_rows(lcp):
    return [('lcp[%d]' % p, v) for p, v in enumerate(lcp)]

def suffix_array_to_string(seq, sa, limit = 40):
    rows = suffix_rows(seq, sa, limit)
    if not rows:
        return ''
    return term_table_string(['%d', '%d', '%s'], rows,
                             ['#', 'SA', 'Suffix'], 'rrl')

def lcp_array_to_string(lcp):
    rows = lcp_rows(lcp)
    if not rows:
        return ''
    return term_table_string(['%s', '%d'], rows, ['Entry', 'LCP'], 'lr')
