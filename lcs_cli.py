# -*- coding: utf-8 -*-

import argparse
import logging
import sys

import lcs_get_config
from lcs_core import LCSAnalysis
from lcs_format import (format_count_table, format_llcs_table, format_matching,
                        format_nlcs_table, write_text)
from lcs_tables import PRECISIONS
from lcs_validation import is_common_subsequence

LOG_LEVEL = lcs_get_config.getConfig("logging", "level")

def build_parser():
    parser = argparse.ArgumentParser(
        prog='lcs-analyze',
        description="Longest common subsequence tables, matching and counts of two strings.")
    parser.add_argument('x', help="first string")
    parser.add_argument('y', help="second string")
    parser.add_argument('--precision', choices=sorted(PRECISIONS), default=None,
                        help="integer width of the NLCS table (default from lcs.conf)")
    parser.add_argument('--log-level', default=LOG_LEVEL, help="logging level")
    return parser

def report(analysis, out=None):
    """Write the full report for an analysis.

    Consistency problems between the tables, the reconstructed LCS and the
    maximal matching are reported inline as '** Error' lines.

    Args:
        analysis: LCSAnalysis of the two strings.
        out: output stream, stdout if None.

    Returns:
        Number of consistency errors found.
    """

    x, y = analysis.x, analysis.y
    errors = 0

    write_text("\nLLCS table for %s and %s: \n\n" % (x, y), out)
    write_text(format_llcs_table(analysis) + "\n", out)

    lcs_len = analysis.length_of_lcs()
    write_text("Length of any LCS is %d\n" % lcs_len, out)

    lcs_str = analysis.longest_common_subsequence()
    write_text("A longest common subsequence is %s\n" % lcs_str, out)

    if len(lcs_str) != lcs_len:
        errors += 1
        write_text("** Error: Length %d is inconsistent with LLCS table, which says %d **\n"
                   % (len(lcs_str), lcs_len), out)
    if not is_common_subsequence(lcs_str, x, y):
        errors += 1
        write_text("** Error: Not a common subsequence!! **\n", out)

    matching = analysis.max_matching()
    write_text("A maximal matching is:\n", out)
    write_text(format_matching(matching), out)
    if not analysis.is_valid_max_matching(matching):
        errors += 1
        write_text("** Error: That is NOT a valid maximal matching!\n", out)

    write_text("\nNLCS table for %s and %s: \n\n" % (x, y), out)
    write_text(format_nlcs_table(analysis) + "\n", out)

    write_text("Number of distinct maximal matchings is %d\n" % analysis.num_max_matchings(), out)
    write_text(format_count_table(analysis) + "\n", out)
    return errors

def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    analysis = LCSAnalysis(args.x, args.y, precision=args.precision)
    errors = report(analysis)
    return 1 if errors else 0

if __name__ == '__main__':
    sys.exit(main())
