# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Random utils.
from termtables import to_string

class StructuredPrinter:
    def __init__(self, enabled):
        self.indent = 0
        self.enabled = enabled

    def print_indented(self, text):
        if self.enabled:
            print(' ' * self.indent + text)

    def header(self, name, fmt = None, args = None):
        if fmt is not None:
            self.print_indented('* %s %s' % (name, fmt % args))
        else:
            self.print_indented('* %s' % name)
        self.indent += 2

    def print(self, fmt, args = None):
        if args is not None:
            s = fmt % args
        else:
            s = str(fmt)
        self.print_indented(s)

    def leave(self):
        self.indent -= 2
        assert self.indent >= 0

SP = StructuredPrinter(False)

def find_subseq(seq, subseq):
    '''Find indices to occurrences of subseq in seq. Oddly enough this
    function doesn't exist in Python's standard library.
    '''
    l = len(subseq)
    for i in range(len(seq) - l + 1):
        if seq[i:i+l] == subseq:
            yield i

def common_prefix_len(seq, i, j):
    '''Length of the common prefix of the suffixes starting at i and
    j, computed by comparing symbols one by one.'''
    n = len(seq)
    k = 0
    while i + k < n and j + k < n and seq[i + k] == seq[j + k]:
        k += 1
    return k

def term_table_string(row_fmt, rows, header, alignment):
    def format_col(fmt, col):
        if callable(fmt):
            return fmt(col)
        return fmt % col
    rows = [[format_col(*e) for e in zip(row_fmt, row)] for row in rows]
    return to_string(rows,
                     header = header,
                     padding = (0, 1),
                     alignment = alignment,
                     style = "            -- ")
