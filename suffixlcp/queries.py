# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Queries answered with a suffix array and its lcp array.
from collections import namedtuple
from itertools import chain

SuffixRow = namedtuple('SuffixRow', ['index', 'offset', 'suffix', 'lcp'])

def prefix_at(seq, offset, m):
    prefix = seq[offset:offset + m]
    if isinstance(seq, (str, bytes)):
        return prefix
    return list(prefix)

def normalize_pattern(seq, pattern):
    if isinstance(seq, (str, bytes)):
        return pattern
    return list(pattern)

# Generate lcp intervals from the lcp array. Children are generated
# before their parents and the right bound is inclusive.
def lcp_intervals(lcp):
    stack = [(0, 0)]
    for i, c in enumerate(chain(lcp[1:], [0]), 1):
        lb = i - 1
        while c < stack[-1][0]:
            i_c, lb = stack.pop()
            yield i_c, lb, i - 1
        if c > stack[-1][0]:
            stack.append((c, lb))

def sa_range(seq, sa, pattern):
    '''Half-open range of sa positions whose suffixes start with
    pattern.
    '''
    pattern = normalize_pattern(seq, pattern)
    m = len(pattern)
    lo, hi = 0, len(sa)
    while lo < hi:  # like bisect.bisect_left
        mid = (lo + hi) // 2
        if prefix_at(seq, sa[mid], m) < pattern:
            lo = mid + 1
        else:
            hi = mid
    start, hi = lo, len(sa)
    while lo < hi:  # like bisect.bisect_right
        mid = (lo + hi) // 2
        if pattern < prefix_at(seq, sa[mid], m):
            hi = mid
        else:
            lo = mid + 1
    return start, lo

def find_occurrences(seq, sa, pattern):
    lo, hi = sa_range(seq, sa, pattern)
    return sorted(sa[lo:hi])

def count_occurrences(seq, sa, pattern):
    lo, hi = sa_range(seq, sa, pattern)
    return hi - lo

# The repeat queries take (seq, sa, lcp) like suffix_rows even though
# the arrays alone are enough to answer them.
def longest_repeated_substring(seq, sa, lcp):
    '''Returns the offset and length of the longest substring
    occurring at least twice. (0, 0) if there is none.
    '''
    best = max(range(len(lcp)), key = lambda i: lcp[i], default = None)
    if best is None or lcp[best] == 0:
        return 0, 0
    return sa[best], lcp[best]

def distinct_substring_count(seq, sa, lcp):
    n = len(sa)
    return n * (n + 1) // 2 - sum(lcp)

def suffix_rows(seq, sa, lcp):
    for i, (offset, lcp_el) in enumerate(zip(sa, lcp)):
        yield SuffixRow(i, offset, seq[offset:], lcp_el if i > 0 else None)
