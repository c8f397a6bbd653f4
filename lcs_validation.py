# -*- coding: utf-8 -*-

import numbers
from collections.abc import Sequence

import numpy as np

def _rows(matching):
    """Split a matching into its f and g rows, None if it is not two positional rows."""
    try:
        if len(matching) != 2:
            return None
        f, g = matching
    except (TypeError, ValueError):
        return None
    if not (_is_positional(f) and _is_positional(g)):
        return None
    return f, g

def _is_positional(row):
    if isinstance(row, np.ndarray):
        return row.ndim == 1
    return isinstance(row, Sequence) and not isinstance(row, str)

def _is_index(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)

def is_increasing(a):
    """Reports whether the values in the given sequence are strictly increasing."""
    return all(a[i - 1] < a[i] for i in range(1, len(a)))

def is_valid_matching(x, y, matching, m, n):
    """Check that a matching describes a common subsequence.

    A valid (but not necessarily maximal) (m, n)-matching has two rows of
    the same length, the values in each row are increasing integers, every
    f value lies in [0, m) and every g value in [0, n), and x[f[i]] == y[g[i]]
    for every i. The empty matching is valid.

    Args:
        x, y: input sequences.
        matching: candidate (f, g) pair, of any shape.
        m, n: prefix lengths, 0 <= m <= len(x) and 0 <= n <= len(y).

    Returns:
        True if valid, False otherwise. Never raises on malformed input.
    """

    rows = _rows(matching)
    if rows is None:
        return False
    f, g = rows
    if len(f) != len(g):
        return False
    if not all(_is_index(i) for i in f) or not all(_is_index(j) for j in g):
        return False
    if not is_increasing(f) or not is_increasing(g):
        return False
    if len(f) == 0:
        return True
    if f[0] < 0 or f[-1] >= m or g[0] < 0 or g[-1] >= n:
        return False

    # verify that f and g describe the same symbols
    return all(x[i] == y[j] for i, j in zip(f, g))

def is_valid_max_matching(x, y, llcs, matching, m, n):
    """Valid (m, n)-matching whose length equals llcs[m][n]."""
    if not is_valid_matching(x, y, matching, m, n):
        return False
    f, _ = _rows(matching)
    return len(f) == llcs[m, n]

def is_subsequence_of(s, v):
    """Reports whether s is a subsequence of v.

    Greedy scan: s[0..i) is kept as the longest prefix of s that is a
    subsequence of v[0..j).
    """

    i = j = 0
    while i != len(s) and j != len(v) and len(s) - i <= len(v) - j:
        if s[i] == v[j]:
            i += 1
        j += 1
    return i == len(s)

def is_common_subsequence(s, x, y):
    return is_subsequence_of(s, x) and is_subsequence_of(s, y)
