# -*- coding: utf-8 -*-

import configparser
import os

# Values used when lcs.conf is missing or leaves a key out
DEFAULTS = {
    "count_table": {"precision": "exact"},
    "table_format": {"row_label_width": "3"},
    "logging": {"level": "WARNING"},
}

def getConfig(section, key, path=None):
    """Read configuration file.

    Parse configuration file with configparser module to get values. Built-in
    defaults are loaded first and the file overrides them.

    Args:
        section: configuration sections.
        key: configuration keys.
        path: alternative configuration file, lcs.conf beside this module if None.

    Returns:
        Value for given section and key.
    """

    config = configparser.ConfigParser()
    config.read_dict(DEFAULTS)
    if path is None:
        path = os.path.split(os.path.realpath(__file__))[0] + '/lcs.conf'
    config.read(path)
    return config.get(section, key)
