import os

import pytest


CONFIG_TEMPLATE = """
[SEARCH]
ALPHABET = {alphabet}
CASE_SENSITIVE = {case_sensitive}
REREAD_ON_QUERY = {reread_on_query}
TEXT_PATH = {text_path}

[LOGGING]
LEVEL = {level}
FILE = {log_file}
"""


@pytest.fixture
def write_config(tmp_path):
    """Fixture returning a factory that writes a config file and returns its path"""
    def _write(name="test_config.conf", **overrides):
        values = {
            "alphabet": '"ACGT"',
            "case_sensitive": "true",
            "reread_on_query": "false",
            "text_path": "",
            "level": "INFO",
            "log_file": "",
        }
        values.update(overrides)
        config_file = os.path.join(str(tmp_path), name)
        with open(config_file, 'w', encoding='utf-8') as f:
            f.write(CONFIG_TEMPLATE.format(**values))
        return config_file
    return _write
