# -*- coding: utf-8 -*-

import collections
import logging
import numbers

import lcs_get_config
from lcs_tables import llcs_table, nlcs_table, exact_count_table
from lcs_validation import is_valid_matching, is_valid_max_matching

logger = logging.getLogger(__name__)

# Read default precision of the NLCS table
COUNT_PRECISION = lcs_get_config.getConfig("count_table", "precision")

Matching = collections.namedtuple('Matching', ['f', 'g'])


class LCSAnalysis(object):
    """Longest common subsequence information for every prefix pair of x and y.

    Let M and N be the lengths of x and y. For 0 <= m <= M and 0 <= n <= N,
    LLCS(m, n) is the length of any longest common subsequence of x[0..m)
    and y[0..n). A maximal (m, n)-matching is a pair of increasing index
    lists (f, g) of length LLCS(m, n) with x[f[i]] == y[g[i]] for every i.

    All tables are built once here and are read-only afterwards, so the query
    methods can be shared between threads once construction has returned.

    Attributes:
        M, N: lengths of x and y.
        llcs: LLCS table.
        nlcs: lattice recurrence table (see lcs_tables.nlcs_table).
        ncount: exact number of distinct maximal matchings per prefix pair.
        precision: precision the nlcs table was built with.
    """

    def __init__(self, x, y, precision=None):
        """Inits with the two sequences of interest and builds all tables."""
        self._x = x
        self._y = y
        self.M = len(x)
        self.N = len(y)
        self.precision = COUNT_PRECISION if precision is None else precision

        logger.debug("Building tables for %d x %d prefixes", self.M + 1, self.N + 1)
        self.llcs = llcs_table(x, y)
        self.nlcs = nlcs_table(x, y, precision=self.precision)
        self.ncount = exact_count_table(x, y, self.llcs)

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def resolve_prefixes(self, m, n):
        """Resolve default prefix lengths and reject out-of-range ones."""
        if m is None:
            m = self.M
        if n is None:
            n = self.N
        for value, bound in ((m, self.M), (n, self.N)):
            if not isinstance(value, numbers.Integral) or isinstance(value, bool):
                raise IndexError("prefix length must be an integer, got %r" % (value,))
            if not 0 <= value <= bound:
                raise IndexError("prefix length %d out of range [0, %d]" % (value, bound))
        return int(m), int(n)

    def _join(self, symbols):
        if isinstance(self._x, str):
            return ''.join(symbols)
        return list(symbols)

    # table lookups

    def length_of_lcs(self, m=None, n=None):
        """Returns LLCS(m, n), or LLCS(M, N) when called without arguments."""
        m, n = self.resolve_prefixes(m, n)
        return int(self.llcs[m, n])

    def num_max_matchings(self, m=None, n=None):
        """Returns the number of distinct maximal (m, n)-matchings."""
        m, n = self.resolve_prefixes(m, n)
        return self.ncount[m, n]

    def num_lattice_paths(self, m=None, n=None):
        """Returns NLCS(m, n) as given by the lattice recurrence."""
        m, n = self.resolve_prefixes(m, n)
        return self.nlcs[m, n]

    def llcs_table(self):
        return self.llcs

    def nlcs_table(self):
        return self.nlcs

    def count_table(self):
        return self.ncount

    # reconstruction

    def _walk(self, m, n):
        """Walk back from (m, n) and yield (i - 1, j - 1) for every matched pair.

        Pairs come out last first. Moves up only when llcs[i - 1][j] is
        strictly greater than llcs[i][j - 1], otherwise moves left.
        """

        x, y, llcs = self._x, self._y, self.llcs
        i, j = m, n
        while i > 0 and j > 0:
            if x[i - 1] == y[j - 1]:
                yield i - 1, j - 1
                i -= 1
                j -= 1
            elif llcs[i - 1, j] > llcs[i, j - 1]:
                i -= 1
            else:
                j -= 1

    def longest_common_subsequence(self, m=None, n=None):
        """Returns a longest common subsequence of x[0..m) and y[0..n).

        Args:
            m, n: prefix lengths, (M, N) if omitted.

        Returns:
            A str when x is a str, a list of symbols otherwise.
        """

        m, n = self.resolve_prefixes(m, n)
        symbols = [self._x[i] for i, _ in self._walk(m, n)]
        symbols.reverse()
        return self._join(symbols)

    def max_matching(self, m=None, n=None):
        """Returns a maximal (m, n)-matching.

        The matching follows the same backward walk as
        longest_common_subsequence, so its symbols spell that subsequence.

        Args:
            m, n: prefix lengths, (M, N) if omitted.

        Returns:
            Matching(f, g) with increasing index lists.
        """

        m, n = self.resolve_prefixes(m, n)
        pairs = list(self._walk(m, n))
        pairs.reverse()
        return Matching([i for i, _ in pairs], [j for _, j in pairs])

    def iter_max_matchings(self, m=None, n=None):
        """Generate every distinct maximal (m, n)-matching once.

        The last pair (p, q) of a matching of length k needs x[p] == y[q] and
        llcs[p][q] == k - 1, and it identifies the matching's tail uniquely,
        so branching on it never produces the same matching twice.
        """

        m, n = self.resolve_prefixes(m, n)
        x, y, llcs = self._x, self._y, self.llcs

        stack = [(m, n, int(llcs[m, n]), [], [])]
        while stack:
            i, j, k, f, g = stack.pop()
            if k == 0:
                yield Matching(f, g)
                continue
            candidates = [(p, q) for p in range(k - 1, i) for q in range(k - 1, j)
                          if x[p] == y[q] and llcs[p, q] == k - 1]
            for p, q in reversed(candidates):
                stack.append((p, q, k - 1, [p] + f, [q] + g))

    # validation

    def is_valid_matching(self, matching, m=None, n=None):
        """Reports whether matching is a valid (not necessarily maximal) (m, n)-matching."""
        m, n = self.resolve_prefixes(m, n)
        return is_valid_matching(self._x, self._y, matching, m, n)

    def is_valid_max_matching(self, matching, m=None, n=None):
        """Reports whether matching is a valid maximal (m, n)-matching."""
        m, n = self.resolve_prefixes(m, n)
        return is_valid_max_matching(self._x, self._y, self.llcs, matching, m, n)
