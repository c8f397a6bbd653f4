import io
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from lcs_cli import build_parser, main, report
from lcs_core import LCSAnalysis


def test_main_reports_consistent_results(capsys):
    assert main(["ABC", "ACB"]) == 0
    out = capsys.readouterr().out
    assert "LLCS table for ABC and ACB" in out
    assert "Length of any LCS is 2" in out
    assert "A longest common subsequence is AC" in out
    assert "A maximal matching is:\n  0   2 \n  0   1 \n" in out
    assert "NLCS table for ABC and ACB" in out
    assert "Number of distinct maximal matchings is 2" in out
    assert "** Error" not in out


def test_main_precision_option(capsys):
    assert main(["aaaaaaaaaaaaaaaaaaaa", "aaaaaaaaaaaaaaaaaaaa", "--precision", "int32"]) == 0
    assert "Length of any LCS is 20" in capsys.readouterr().out


def test_parser_defaults():
    args = build_parser().parse_args(["x", "y"])
    assert args.precision is None
    assert args.log_level == "WARNING"


class BrokenAnalysis(LCSAnalysis):
    def longest_common_subsequence(self, m=None, n=None):
        return "ZZ"


def test_report_flags_inconsistent_subsequence():
    out = io.StringIO()
    assert report(BrokenAnalysis("ABC", "ACB"), out) == 1
    assert "** Error: Not a common subsequence!! **" in out.getvalue()


def test_report_to_stream():
    out = io.StringIO()
    assert report(LCSAnalysis("", "abc"), out) == 0
    assert "Length of any LCS is 0" in out.getvalue()
