import os
import logging
from logging.handlers import RotatingFileHandler

import pytest

from bmsearch.search.errors import InvalidAlphabet
from bmsearch.config.config import (
    DEFAULT_CONFIG_FILE,
    Config,
    ConfigError,
    ConfigFileError,
    ConfigValidationError,
)


def test_init_with_valid_config(write_config, tmp_path):
    """Test initialization with a valid config file"""
    log_file = os.path.join(str(tmp_path), "logs", "bmsearch.log")
    config = Config(write_config(log_file=log_file))

    assert config.alphabet == "ACGT"
    assert config.case_sensitive is True
    assert config.reread_on_query is False
    assert config.text_path is None

    assert config.log_level == "INFO"
    assert config.log_file == log_file
    assert config.logger is not None
    assert config.logger.name == "bmsearch"


def test_default_config():
    config = Config()
    assert config.config_file == DEFAULT_CONFIG_FILE
    assert config.alphabet == "abcdefghijklmnopqrstuvwxyz "
    assert config.case_sensitive is False
    assert config.text_path is None


def test_quoted_alphabet_keeps_whitespace(write_config):
    config = Config(write_config(alphabet='" acgt"'))
    assert config.alphabet == " acgt"


def test_repeated_space_in_alphabet(write_config):
    with pytest.raises(ConfigValidationError, match="' ' appears more than once"):
        Config(write_config(alphabet='" acgt "'))


def test_unquoted_alphabet(write_config):
    config = Config(write_config(alphabet="ACGT"))
    assert config.alphabet == "ACGT"


def test_single_quoted_alphabet(write_config):
    config = Config(write_config(alphabet="'ab '"))
    assert config.alphabet == "ab "


def test_percent_in_alphabet(write_config):
    config = Config(write_config(alphabet='"%ab"'))
    assert config.alphabet == "%ab"


def test_init_with_missing_file():
    """Test initialization with missing config file"""
    with pytest.raises(ConfigFileError, match="Configuration file 'nonexistent.conf' not found"):
        Config("nonexistent.conf")


def test_init_with_malformed_config(tmp_path):
    """Test initialization with malformed config file"""
    config_file = os.path.join(str(tmp_path), "malformed.conf")
    with open(config_file, 'w') as f:
        f.write("This is not a valid INI file\n[BROKEN")

    with pytest.raises(ConfigFileError, match="Failed to parse configuration file"):
        Config(config_file)


def test_missing_required_sections(tmp_path):
    """Test initialization with missing required sections"""
    config_file = os.path.join(str(tmp_path), "incomplete.conf")
    with open(config_file, 'w') as f:
        f.write("[SEARCH]\nALPHABET=ACGT\n")

    with pytest.raises(ConfigFileError, match="Missing required sections"):
        Config(config_file)


def test_missing_alphabet(tmp_path):
    config_file = os.path.join(str(tmp_path), "no_alphabet.conf")
    with open(config_file, 'w') as f:
        f.write("[SEARCH]\nCASE_SENSITIVE = true\nREREAD_ON_QUERY = false\n\n[LOGGING]\nLEVEL = INFO\n")

    with pytest.raises(ConfigValidationError, match="Required configuration 'SEARCH.ALPHABET' not found"):
        Config(config_file)


@pytest.mark.parametrize("alphabet", ["", '""'])
def test_empty_alphabet(write_config, alphabet):
    with pytest.raises(ConfigValidationError, match="'SEARCH.ALPHABET' is empty"):
        Config(write_config(alphabet=alphabet))


def test_duplicate_alphabet_symbol(write_config):
    with pytest.raises(ConfigValidationError, match="appears more than once"):
        Config(write_config(alphabet="ACGTA"))


def test_multibyte_alphabet_symbol(write_config):
    with pytest.raises(ConfigValidationError, match="is not a single-byte symbol"):
        Config(write_config(alphabet="ACGT€"))


def test_alphabet_error_keeps_cause(write_config):
    with pytest.raises(ConfigValidationError, match="Invalid 'SEARCH.ALPHABET'") as excinfo:
        Config(write_config(alphabet="ACGTA"))
    assert isinstance(excinfo.value.__cause__, InvalidAlphabet)


def test_invalid_boolean(write_config):
    with pytest.raises(ConfigValidationError, match="Invalid boolean value for 'SEARCH.CASE_SENSITIVE'"):
        Config(write_config(case_sensitive="maybe"))


def test_nonexistent_text_path(write_config):
    with pytest.raises(ConfigValidationError, match="Text path does not exist"):
        Config(write_config(text_path="/nonexistent/path"))


def test_text_path_is_directory(write_config, tmp_path):
    with pytest.raises(ConfigValidationError, match="Text path is not a file"):
        Config(write_config(text_path=str(tmp_path)))


def test_valid_text_path(write_config, tmp_path):
    text_file = tmp_path / "text.txt"
    text_file.write_text("GCTAGCTCTACGAGTCTA\n")
    config = Config(write_config(text_path=str(text_file)))
    assert config.text_path == str(text_file)


def test_invalid_log_level(write_config):
    with pytest.raises(ConfigValidationError, match="Invalid log level 'LOUD'"):
        Config(write_config(level="LOUD"))


def test_log_file_parent_missing(write_config):
    with pytest.raises(ConfigValidationError, match="Log file parent directory does not exist"):
        Config(write_config(log_file="/nonexistent/deeper/dir/bmsearch.log"))


def test_logger_handlers(write_config, tmp_path):
    log_file = os.path.join(str(tmp_path), "logs", "bmsearch.log")
    config = Config(write_config(level="debug", log_file=log_file))

    assert os.path.exists(log_file)
    assert config.logger.level == logging.DEBUG
    assert len(config.logger.handlers) == 2
    assert isinstance(config.logger.handlers[1], RotatingFileHandler)


def test_handlers_not_duplicated(write_config):
    config_file = write_config()
    Config(config_file)
    config = Config(config_file)
    assert len(config.logger.handlers) == 1


def test_get(write_config):
    config = Config(write_config())
    assert config.get("SEARCH", "CASE_SENSITIVE") == "true"
    assert config.get("SEARCH", "MISSING") is None
    with pytest.raises(ConfigError, match="Configuration section 'NOPE' not found"):
        config.get("NOPE", "KEY")


def test_str(write_config):
    config = Config(write_config())
    assert str(config) == (
        "Config(alphabet='ACGT', case_sensitive=True, text_path=None, "
        "reread_on_query=False, log_level='INFO')"
    )


def test_save_creates_backup(write_config, tmp_path):
    config_file = write_config()
    config = Config(config_file)
    config.config["SEARCH"]["CASE_SENSITIVE"] = "false"
    config.save()

    assert os.path.exists(f"{config_file}.backup")
    assert Config(config_file).case_sensitive is False


def test_save_to_new_location(write_config, tmp_path):
    config = Config(write_config())
    target = os.path.join(str(tmp_path), "copies", "saved.conf")
    config.save(target)

    assert Config(target).alphabet == "ACGT"
    assert not os.path.exists(f"{target}.backup")


def test_reload(write_config):
    config_file = write_config()
    config = Config(config_file)
    write_config(alphabet='"acgt"')

    config.reload()
    assert config.alphabet == "acgt"


def test_reload_failure_restores_state(write_config):
    config_file = write_config()
    config = Config(config_file)
    write_config(level="LOUD")

    with pytest.raises(ConfigValidationError):
        config.reload()
    assert config.log_level == "INFO"
    assert config.alphabet == "ACGT"
