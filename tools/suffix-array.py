# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
'''
Suffix array tool
=================
Builds suffix and lcp arrays and searches for patterns in texts.

Usage:
    suffix-array.py [-hv] build <text> [--limit=<i>]
    suffix-array.py [-hv] build --file=<path> [--limit=<i>]
    suffix-array.py [-hv] search <text> <pattern>... [--all]
    suffix-array.py [-hv] search --file=<path> <pattern>... [--all]

Options:
    -h --help              show this screen
    -v --verbose           print more output
    --file=<path>          read the text from a utf-8 encoded file
    --limit=<i>            truncate printed suffixes to this many
                           symbols [default: 40]
    --all                  print every occurrence of each pattern
'''
from docopt import docopt
from sufarr.params import ToolParams
from sufarr.prettyprint import lcp_array_to_string, suffix_array_to_string
from sufarr.repeats import count_distinct_substrings
from sufarr.search import NOT_FOUND, find_all, search_pattern
from sufarr.suffix_array import lcp_array, suffix_array
from sufarr.utils import SP
from sys import exit

def build(params, text):
    sa = suffix_array(text)
    lcp = lcp_array(text, sa)
    if not sa:
        print('Empty text.')
        return
    print(suffix_array_to_string(text, sa, params.limit))
    print()
    if lcp:
        print(lcp_array_to_string(lcp))
        print()
    n_distinct = count_distinct_substrings(text, sa, lcp)
    print('%d symbols, %d distinct substrings.' % (len(text), n_distinct))

def search(params, text):
    sa = suffix_array(text)
    for pattern in params.patterns:
        if params.find_all:
            offsets = find_all(text, sa, pattern)
            if offsets:
                print('%-20s found at %s' %
                      (pattern, ', '.join(map(str, offsets))))
            else:
                print('%-20s not found' % pattern)
            continue
        ofs = search_pattern(text, sa, pattern)
        if ofs != NOT_FOUND:
            print('%-20s found at %d' % (pattern, ofs))
        else:
            print('%-20s not found' % pattern)

def main():
    args = docopt(__doc__, version = 'Suffix array tool 1.0')
    try:
        params = ToolParams.from_docopt_args(args)
    except ValueError as e:
        exit(str(e))
    SP.enabled = params.verbose
    SP.header('PARAMETERS')
    SP.print(params.to_string())
    SP.leave()

    text = params.load_text()
    if params.command == 'build':
        build(params, text)
    else:
        search(params, text)

if __name__ == '__main__':
    main()
