# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Suffix arrays by prefix doubling and lcp arrays by Kasai's
# algorithm. The text can be a str, bytes or any sequence of
# comparable tokens.
from suffixlcp.utils import SP
import numpy as np

# Rank of the empty suffix. Smaller than every real rank.
SENTINEL = -1

class InvalidInput(ValueError):
    pass

class PreconditionViolation(ValueError):
    pass

def initial_ranks(seq):
    vocab = sorted(set(seq))
    ch2idx = {ch: i for i, ch in enumerate(vocab)}
    return np.array([ch2idx[t] for t in seq], dtype = np.int64)

def shift_ranks(rank0, k):
    '''Ranks of the suffixes starting k positions further.'''
    n = len(rank0)
    rank1 = np.full(n, SENTINEL, dtype = np.int64)
    if k < n:
        rank1[:n - k] = rank0[k:]
    return rank1

def rerank(rank0, rank1, inds):
    '''Equivalence classes of all offsets. inds must sort the
    (rank0, rank1) pairs. The class id only increments when the pair
    changes. The returned array is indexed by offset.
    '''
    changed = np.logical_or(np.diff(rank0[inds]), np.diff(rank1[inds]))
    cls = np.empty(len(inds), dtype = np.int64)
    cls[inds[0]] = 0
    cls[inds[1:]] = np.cumsum(changed)
    return cls

def suffix_array(seq):
    if seq is None:
        raise InvalidInput('No text given!')
    n = len(seq)
    if n == 0:
        return []
    rank0 = initial_ranks(seq)
    SP.print('Suffix array of %d tokens.', n)
    k = 1
    rank1 = shift_ranks(rank0, k)
    inds = np.lexsort((rank1, rank0))
    while True:
        cls = rerank(rank0, rank1, inds)
        n_classes = int(cls[inds[-1]]) + 1
        SP.print('Length %d: %d classes.', (2 * k, n_classes))
        if n_classes == n:
            break
        k *= 2
        rank0, rank1 = cls, shift_ranks(cls, k)
        inds = np.lexsort((rank1, rank0))
    return inds.tolist()

def rank_array(sa):
    rank = [0] * len(sa)
    for i, offset in enumerate(sa):
        rank[offset] = i
    return rank

def check_suffix_array(seq, sa):
    '''Checks that sa is a permutation of the offsets of seq. Does not
    check that it is sorted.
    '''
    n = len(seq)
    if len(sa) != n:
        fmt = 'Suffix array has %d entries but the text has %d tokens!'
        raise PreconditionViolation(fmt % (len(sa), n))
    seen = [False] * n
    for offset in sa:
        if not 0 <= offset < n:
            fmt = 'Offset %d is outside of [0, %d)!'
            raise PreconditionViolation(fmt % (offset, n))
        if seen[offset]:
            raise PreconditionViolation('Offset %d occurs twice!' % offset)
        seen[offset] = True

def lcp_array(seq, sa):
    '''Returns the lcp array. lcp[i] is the length of the longest
    common prefix of the suffixes at sa[i - 1] and sa[i]. lcp[0] is
    undefined and always 0.
    '''
    if seq is None:
        raise InvalidInput('No text given!')
    check_suffix_array(seq, sa)
    n = len(sa)
    lcp = [0] * n
    rank = rank_array(sa)
    k = 0
    for i, rank_el in enumerate(rank):
        if rank_el == n - 1:
            k = 0
            continue
        j = sa[rank_el + 1]
        # Dropping the first token can shorten the match by at most
        # one.
        if k > 0:
            k -= 1
        while i + k < n and j + k < n and seq[i + k] == seq[j + k]:
            k += 1
        lcp[rank_el + 1] = k
    return lcp

def suffix_lcp_arrays(seq):
    sa = suffix_array(seq)
    return sa, lcp_array(seq, sa)
