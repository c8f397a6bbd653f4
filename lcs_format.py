# -*- coding: utf-8 -*-

import sys

import numpy as np
import pandas as pd

import lcs_get_config

ROW_LABEL_WIDTH = int(lcs_get_config.getConfig("table_format", "row_label_width"))

def format_table(table, m, n, row_label_width=ROW_LABEL_WIDTH):
    """Render the [0..m] x [0..n] corner of a prefix table as text.

    Rows go from m down to 0, each one is the row index, a '|' and the cell
    values right-justified to a common width. A ruler line and a row of
    column indices close the table.

    Args:
        table: 2-D table indexed [m, n].
        m, n: last row and column to show.
        row_label_width: width of the row index column.

    Returns:
        Table text, one line per row, ending with a newline.
    """

    region = np.asarray(table)[:m + 1, :n + 1]
    width = max(len(str(v)) for v in list(region.flat) + [n])
    cell = '%*d '

    lines = []
    for i in range(m, -1, -1):
        cells = ''.join(cell % (width, v) for v in region[i])
        lines.append('%*d|%s' % (row_label_width, i, cells))
    lines.append(' ' * row_label_width + '+' + '-' * ((width + 1) * (n + 1)))
    lines.append(' ' * (row_label_width + 1) + ''.join(cell % (width, j) for j in range(n + 1)))
    return '\n'.join(lines) + '\n'

def format_llcs_table(analysis, m=None, n=None):
    """LLCS table of an LCSAnalysis up to LLCS(m, n)."""
    m, n = analysis.resolve_prefixes(m, n)
    return format_table(analysis.llcs_table(), m, n)

def format_nlcs_table(analysis, m=None, n=None):
    m, n = analysis.resolve_prefixes(m, n)
    return format_table(analysis.nlcs_table(), m, n)

def format_count_table(analysis, m=None, n=None):
    m, n = analysis.resolve_prefixes(m, n)
    return format_table(analysis.count_table(), m, n)

def format_matching(matching):
    """Both rows of a matching, every index printed as '%3d '."""
    return ''.join(''.join('%3d ' % v for v in row) + '\n' for row in matching)

def table_frame(table, m, n):
    """Export the [0..m] x [0..n] corner of a prefix table as a dataframe.

    Args:
        table: 2-D table indexed [m, n].
        m, n: last row and column to export.

    Returns:
        dataframe indexed by prefix length of x, with columns for prefix length of y.
    """

    df = pd.DataFrame(np.asarray(table)[:m + 1, :n + 1].tolist())
    df.index.name = 'm'
    df.columns.name = 'n'
    return df

def write_text(text, out=None):
    """Write rendered text to the given stream, stdout by default."""
    if out is None:
        out = sys.stdout
    out.write(text)
