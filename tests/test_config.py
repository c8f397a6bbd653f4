import configparser
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import lcs_get_config


def test_shipped_configuration():
    assert lcs_get_config.getConfig("count_table", "precision") == "exact"
    assert lcs_get_config.getConfig("table_format", "row_label_width") == "3"


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "lcs.conf"
    path.write_text("[table_format]\nrow_label_width = 5\n")
    assert lcs_get_config.getConfig("table_format", "row_label_width", path=str(path)) == "5"
    assert lcs_get_config.getConfig("count_table", "precision", path=str(path)) == "exact"


def test_missing_file_uses_defaults(tmp_path):
    path = tmp_path / "absent.conf"
    assert lcs_get_config.getConfig("logging", "level", path=str(path)) == "WARNING"


def test_defaults_mirror_shipped_file():
    shipped = configparser.ConfigParser()
    shipped.read(os.path.join(os.path.dirname(lcs_get_config.__file__), "lcs.conf"))
    sections = {s: dict(shipped.items(s)) for s in shipped.sections()}
    assert sections == lcs_get_config.DEFAULTS
