# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Suffix array and lcp array tables.
from suffixlcp.queries import suffix_rows
from suffixlcp.suffix_array import suffix_lcp_arrays
from suffixlcp.utils import SP, format_suffix, term_table

DEMO_TEXTS = [
    ('Short string', 'ababa'),
    ('Medium string', 'mississippi'),
    ('Longer string (DNA sequence)', 'GCGTATGCGTGTATGCGTGCGTAT')
]

def format_lcp(lcp_el):
    return '-' if lcp_el is None else str(lcp_el)

def suffix_table(seq, sa, lcp, width):
    rows = [(r.index, r.offset, r.suffix, r.lcp)
            for r in suffix_rows(seq, sa, lcp)]
    row_fmt = ['%d', '%d', lambda s: format_suffix(s, width), format_lcp]
    header = ['Index', 'SA[i]', 'Suffix', 'LCP[i]']
    return term_table(row_fmt, rows, header, 'rrlr')

def report(seq, description, width):
    '''Returns the lines describing seq's suffix and lcp arrays.'''
    SP.header('REPORT', '%s', description)
    try:
        sa, lcp = suffix_lcp_arrays(seq)
    finally:
        SP.leave()
    lines = [
        description,
        'Text: %s' % format_suffix(seq, None),
        'SA:   %s' % sa,
        'LCP:  %s' % lcp
    ]
    if seq:
        lines.append(suffix_table(seq, sa, lcp, width))
    return lines

def print_report(seq, description, width):
    print('\n'.join(report(seq, description, width)))
