from suffixlcp.queries import (count_occurrences, distinct_substring_count,
                               find_occurrences, lcp_intervals,
                               longest_repeated_substring, suffix_rows)
from suffixlcp.suffix_array import suffix_lcp_arrays

def test_lcp_intervals():
    sa, lcp = suffix_lcp_arrays('banana')
    copy = list(lcp)
    assert list(lcp_intervals(lcp)) == [(3, 1, 2), (1, 0, 2), (2, 4, 5)]
    assert lcp == copy

    sa, lcp = suffix_lcp_arrays('mississippi')
    intervals = list(lcp_intervals(lcp))
    assert intervals == [(4, 2, 3), (1, 0, 3), (1, 5, 6),
                         (2, 7, 8), (3, 9, 10), (1, 7, 10)]
    assert list(lcp_intervals([])) == []
    assert list(lcp_intervals([0])) == []

def test_find_occurrences():
    seq = 'banana'
    sa, _ = suffix_lcp_arrays(seq)
    examples = [
        ('ana', [1, 3]),
        ('a', [1, 3, 5]),
        ('banana', [0]),
        ('bananas', []),
        ('x', []),
        ('', [0, 1, 2, 3, 4, 5])
    ]
    for pattern, offsets in examples:
        assert find_occurrences(seq, sa, pattern) == offsets
        assert count_occurrences(seq, sa, pattern) == len(offsets)

    seq = 'mississippi'
    sa, _ = suffix_lcp_arrays(seq)
    assert find_occurrences(seq, sa, 'issi') == [1, 4]
    assert count_occurrences(seq, sa, 'ssi') == 2
    assert count_occurrences(seq, sa, 'i') == 4

def test_find_tokens():
    seq = ['the', 'cat', 'the', 'dog', 'the', 'cat']
    sa, _ = suffix_lcp_arrays(seq)
    assert find_occurrences(seq, sa, ('the', 'cat')) == [0, 4]
    assert find_occurrences(seq, sa, ['dog']) == [3]

    seq = b'abracadabra'
    sa, _ = suffix_lcp_arrays(seq)
    assert find_occurrences(seq, sa, b'abra') == [0, 7]

def test_longest_repeated_substring():
    examples = [
        ('banana', 'ana'),
        ('mississippi', 'issi'),
        ('GCGTATGCGTGTATGCGTGCGTAT', 'GTATGCGTG'),
        ('aaaa', 'aaa')
    ]
    for seq, rep in examples:
        sa, lcp = suffix_lcp_arrays(seq)
        offset, length = longest_repeated_substring(seq, sa, lcp)
        assert seq[offset:offset + length] == rep

    for seq in ['', 'a', 'abcd']:
        sa, lcp = suffix_lcp_arrays(seq)
        assert longest_repeated_substring(seq, sa, lcp) == (0, 0)

def test_distinct_substring_count():
    examples = [
        ('', 0),
        ('a', 1),
        ('aaaa', 4),
        ('banana', 15),
        ('mississippi', 53)
    ]
    for seq, count in examples:
        sa, lcp = suffix_lcp_arrays(seq)
        assert distinct_substring_count(seq, sa, lcp) == count

def test_suffix_rows():
    seq = 'banana'
    sa, lcp = suffix_lcp_arrays(seq)
    rows = list(suffix_rows(seq, sa, lcp))
    assert len(rows) == 6
    assert rows[0].lcp is None
    assert rows[0].suffix == 'a'
    assert [r.offset for r in rows] == sa
    assert [r.lcp for r in rows[1:]] == [1, 3, 0, 0, 2]
    assert rows[3].suffix == 'banana'

def test_repeat_queries_use_arrays():
    sa, lcp = suffix_lcp_arrays('banana')
    assert longest_repeated_substring(None, sa, lcp) == (1, 3)
    assert distinct_substring_count(None, sa, lcp) == 15
