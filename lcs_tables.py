# -*- coding: utf-8 -*-

import logging
from time import time

import numpy as np

logger = logging.getLogger(__name__)

# Signed widths for the fixed-width count tables; None keeps Python ints
PRECISIONS = {'exact': None, 'int32': 32, 'int64': 64}

def wrap_signed(value, bits):
    """Reduce an integer to a signed two's-complement value of the given width."""
    if bits is None:
        return value
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half

def _freeze(table):
    table.setflags(write=False)
    return table

def llcs_table(x, y):
    """Build the LLCS table of two sequences.

    Fill row 0 and column 0 with zeros, then sweep the remaining cells row by
    row so that llcs[m][n] is the length of a longest common subsequence of
    x[0..m) and y[0..n).

    Args:
        x, y: input sequences.

    Returns:
        Read-only numpy array of shape (len(x) + 1, len(y) + 1).
    """

    x_len = len(x)
    y_len = len(y)

    t0 = time()
    llcs = np.zeros((x_len + 1, y_len + 1), dtype=np.int64)

    for m in range(1, 1 + x_len):
        for n in range(1, 1 + y_len):
            if x[m - 1] == y[n - 1]:
                llcs[m, n] = llcs[m - 1, n - 1] + 1
            else:
                llcs[m, n] = max(llcs[m, n - 1], llcs[m - 1, n])

    logger.debug("llcs table %dx%d done in %0.3fs.", x_len + 1, y_len + 1, time() - t0)
    return _freeze(llcs)

def nlcs_table(x, y, precision='exact'):
    """Build the NLCS table by the lattice recurrence.

    nlcs[m][0] = nlcs[0][n] = 1. Otherwise a cell sums its upper and left
    neighbours, plus the diagonal one when x[m - 1] == y[n - 1]. The
    recurrence counts paths through the edit lattice, so it overcounts the
    distinct maximal matchings (see exact_count_table).

    Args:
        x, y: input sequences.
        precision: 'exact' for arbitrary precision, 'int32' or 'int64' to
            wrap every cell silently to that signed width.

    Returns:
        Read-only numpy object array of Python ints.
    """

    if precision not in PRECISIONS:
        raise ValueError("unknown count precision %r" % (precision,))
    bits = PRECISIONS[precision]

    x_len = len(x)
    y_len = len(y)

    t0 = time()
    nlcs = np.empty((x_len + 1, y_len + 1), dtype=object)
    nlcs[:, 0] = 1
    nlcs[0, :] = 1

    for m in range(1, 1 + x_len):
        for n in range(1, 1 + y_len):
            count = nlcs[m - 1, n] + nlcs[m, n - 1]
            if x[m - 1] == y[n - 1]:
                count += nlcs[m - 1, n - 1]
            nlcs[m, n] = wrap_signed(count, bits)

    logger.debug("nlcs table (%s) done in %0.3fs.", precision, time() - t0)
    return _freeze(nlcs)

def exact_count_table(x, y, llcs):
    """Count the distinct maximal matchings of every prefix pair.

    A maximal (m, n)-matching of length L either pairs x[m - 1] with
    y[n - 1], or leaves out x[m - 1], or leaves out y[n - 1]. The last two
    groups overlap in the matchings that leave out both, which are counted
    once more and subtracted when llcs[m - 1][n - 1] == L.

    Args:
        x, y: input sequences.
        llcs: table returned by llcs_table(x, y).

    Returns:
        Read-only numpy object array of Python ints.
    """

    x_len = len(x)
    y_len = len(y)

    t0 = time()
    counts = np.empty((x_len + 1, y_len + 1), dtype=object)
    counts[:, 0] = 1
    counts[0, :] = 1

    for m in range(1, 1 + x_len):
        for n in range(1, 1 + y_len):
            longest = llcs[m, n]
            count = 0
            if x[m - 1] == y[n - 1]:
                count += counts[m - 1, n - 1]
            if llcs[m - 1, n] == longest:
                count += counts[m - 1, n]
            if llcs[m, n - 1] == longest:
                count += counts[m, n - 1]
            if llcs[m - 1, n - 1] == longest:
                count -= counts[m - 1, n - 1]
            counts[m, n] = count

    logger.debug("exact count table done in %0.3fs.", time() - t0)
    return _freeze(counts)
