import os
import sys
import shutil
import configparser
from typing import Any, Optional
import logging
from logging.handlers import RotatingFileHandler

from bmsearch.search.errors import InvalidAlphabet
from bmsearch.search.preprocessing import alphabet_map

DEFAULT_CONFIG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "bmsearch.conf")


class ConfigError(Exception):
    """Base exception for configuration-related errors."""
    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""
    pass


class ConfigFileError(ConfigError):
    """Raised when there are issues with the configuration file."""
    pass


class Config:
    """Manages search configuration and logging setup.

    Reads settings from an INI file, validates them, and initializes a logger
    with both console and file handlers (if specified).

    Attributes:
        alphabet (str): Ordered symbols patterns and texts are drawn from.
        case_sensitive (bool): Whether search is case-sensitive.
        text_path (Optional[str]): Default text file to search.
        reread_on_query (bool): Whether to re-read the text file on each query.
        log_level (str): Logging level (e.g., "INFO", "DEBUG").
        log_file (Optional[str]): Path to log file (if specified).
        logger (Optional[logging.Logger]): Configured logger instance.
    """

    VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
    LOGGER_NAME = "bmsearch"

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE) -> None:
        """Initializes the configuration from a file.

        Args:
            config_file: Path to the configuration INI file.

        Raises:
            ConfigFileError: If the config file does not exist or cannot be read.
            ConfigValidationError: If required settings are missing or invalid.
        """
        self.config_file = config_file
        self.config = configparser.ConfigParser(interpolation=None)
        self.logger: Optional[logging.Logger] = None

        try:
            self._load_config_file()
            self._parse_configuration()
            self._validate_config()
            self._initiate_logger()
        except (ConfigFileError, ConfigValidationError):
            raise
        except Exception as e:
            raise ConfigError(f"Unexpected error during configuration initialization: {e}") from e

    def _load_config_file(self) -> None:
        """Loads and parses the configuration file.

        Raises:
            ConfigFileError: If file doesn't exist, can't be read, or has parsing errors.
        """
        if not os.path.exists(self.config_file):
            raise ConfigFileError(f"Configuration file '{self.config_file}' not found")

        if not os.access(self.config_file, os.R_OK):
            raise ConfigFileError(f"Configuration file '{self.config_file}' is not readable")

        try:
            self.config.read(self.config_file, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigFileError(f"Failed to parse configuration file '{self.config_file}': {e}") from e
        except Exception as e:
            raise ConfigFileError(f"Unexpected error reading configuration file '{self.config_file}': {e}") from e

        required_sections = ['SEARCH', 'LOGGING']
        missing_sections = [section for section in required_sections if section not in self.config]
        if missing_sections:
            raise ConfigFileError(f"Missing required sections in config file: {missing_sections}")

    def _get_raw_value(self, section: str, key: str) -> str:
        if section not in self.config or key not in self.config[section]:
            raise ConfigValidationError(f"Required configuration '{section}.{key}' not found")

        value = self.config[section].get(key)
        if not value or not value.strip():
            raise ConfigValidationError(f"Required configuration '{section}.{key}' is empty")
        return value

    def _get_required_bool(self, section: str, key: str) -> bool:
        """Retrieves a required boolean value from config.

        Raises:
            ConfigValidationError: If value is missing or cannot be converted to bool.
        """
        value = self._get_raw_value(section, key)
        try:
            return self.config[section].getboolean(key)
        except ValueError as e:
            raise ConfigValidationError(f"Invalid boolean value for '{section}.{key}': '{value}'. Use true/false, yes/no, or 1/0") from e

    def _get_required_str(self, section: str, key: str) -> str:
        return self._get_raw_value(section, key).strip()

    def _get_required_symbols(self, section: str, key: str) -> str:
        """Retrieves a string whose whitespace is significant.

        A value wrapped in matching single or double quotes is returned without
        the quotes and otherwise untouched, so it may start or end with a space.
        """
        value = self._get_raw_value(section, key).strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        if not value:
            raise ConfigValidationError(f"Required configuration '{section}.{key}' is empty")
        return value

    def _get_optional_str(self, section: str, key: str) -> Optional[str]:
        """Retrieves an optional string value from config.

        Returns:
            String value or None if not present or empty.
        """
        if section not in self.config or key not in self.config[section]:
            return None

        value = self.config[section].get(key)
        if not value or not value.strip():
            return None

        return value.strip()

    def _parse_configuration(self) -> None:
        """Parses all configuration values with strict validation."""
        self.alphabet = self._get_required_symbols("SEARCH", "ALPHABET")
        self.case_sensitive = self._get_required_bool("SEARCH", "CASE_SENSITIVE")
        self.reread_on_query = self._get_required_bool("SEARCH", "REREAD_ON_QUERY")
        self.text_path = self._get_optional_str("SEARCH", "TEXT_PATH")

        self.log_level = self._get_required_str("LOGGING", "LEVEL")
        self.log_file = self._get_optional_str("LOGGING", "FILE")

    def _create_log_file(self, log_path: str) -> None:
        """Creates a log file and its directory structure if needed.

        Raises:
            ConfigError: If log file or directory cannot be created.
        """
        try:
            directory = os.path.dirname(log_path)
            if directory:
                if not os.path.exists(directory):
                    os.makedirs(directory, mode=0o755)
                elif not os.access(directory, os.W_OK):
                    raise ConfigError(f"Log directory '{directory}' is not writable")

            if os.path.exists(log_path):
                if not os.access(log_path, os.W_OK):
                    raise ConfigError(f"Log file '{log_path}' is not writable")
            else:
                try:
                    with open(log_path, "x", encoding="utf-8"):
                        pass
                except FileExistsError:
                    pass
                except PermissionError:
                    raise ConfigError(f"Permission denied when creating log file '{log_path}'")

        except OSError as e:
            raise ConfigError(f"Failed to create log file or directory for '{log_path}': {e}") from e

    def _validate_config(self) -> None:
        """Validates all configuration settings strictly.

        Raises:
            ConfigValidationError: If any settings are invalid.
        """
        try:
            alphabet_map(self.alphabet)
        except InvalidAlphabet as e:
            raise ConfigValidationError(f"Invalid 'SEARCH.ALPHABET': {e}") from e

        if self.text_path:
            if not os.path.exists(self.text_path):
                raise ConfigValidationError(f"Text path does not exist: '{self.text_path}'")
            if not os.access(self.text_path, os.R_OK):
                raise ConfigValidationError(f"Text path is not readable: '{self.text_path}'")
            if not os.path.isfile(self.text_path):
                raise ConfigValidationError(f"Text path is not a file: '{self.text_path}'")

        if self.log_level.upper() not in self.VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"Invalid log level '{self.log_level}'. "
                f"Valid options: {', '.join(sorted(self.VALID_LOG_LEVELS))}"
            )

        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir and not os.path.exists(log_dir):
                parent_dir = os.path.dirname(log_dir)
                if parent_dir and not os.path.exists(parent_dir):
                    raise ConfigValidationError(f"Log file parent directory does not exist: '{parent_dir}'")

    def _initiate_logger(self) -> None:
        """Initializes the logger with console and file handlers.

        Sets up:
            - Logging format.
            - Console handler (stderr).
            - File handler (if `log_file` is specified).
            - Log rotation (10MB per file, max 3 backups).

        Raises:
            ConfigError: If logger setup fails.
        """
        log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        formatter = logging.Formatter(log_format)

        try:
            log_level = getattr(logging, self.log_level.upper())
        except AttributeError:
            raise ConfigError(f"Invalid log level: {self.log_level}")

        self.logger = logging.getLogger(self.LOGGER_NAME)
        self.logger.setLevel(log_level)

        # Clear existing handlers to avoid duplicates
        if self.logger.hasHandlers():
            for handler in list(self.logger.handlers):
                handler.close()
            self.logger.handlers.clear()

        try:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            console_handler.setLevel(log_level)
            self.logger.addHandler(console_handler)
        except Exception as e:
            raise ConfigError(f"Failed to initialize console logging: {e}") from e

        if self.log_file:
            try:
                self._create_log_file(self.log_file)
                file_handler = RotatingFileHandler(
                    self.log_file,
                    maxBytes=10 * 1024 * 1024,  # 10MB
                    backupCount=3,
                    encoding="utf-8",
                )
                file_handler.setFormatter(formatter)
                file_handler.setLevel(log_level)
                self.logger.addHandler(file_handler)
            except Exception as e:
                raise ConfigError(f"Failed to initialize file logging for '{self.log_file}': {e}") from e

    def get(self, section: str, key: str) -> Any:
        """Retrieves a raw value from the configuration.

        Raises:
            ConfigError: If section doesn't exist.
        """
        if section not in self.config:
            raise ConfigError(f"Configuration section '{section}' not found")
        return self.config[section].get(key)

    def __str__(self) -> str:
        return (
            f"Config(alphabet={self.alphabet!r}, "
            f"case_sensitive={self.case_sensitive}, "
            f"text_path={self.text_path!r}, "
            f"reread_on_query={self.reread_on_query}, "
            f"log_level='{self.log_level}')"
        )

    def save(self, config_file: Optional[str] = None) -> None:
        """Saves the current configuration to a file.

        Args:
            config_file: Path to the output INI file. If None, uses original config file.

        Raises:
            ConfigError: If file cannot be written.
        """
        target_file = config_file or self.config_file

        try:
            directory = os.path.dirname(target_file)
            if directory:
                if not os.path.exists(directory):
                    os.makedirs(directory, mode=0o755)
                elif not os.access(directory, os.W_OK):
                    raise ConfigError(f"Directory '{directory}' is not writable")

            if os.path.exists(target_file):
                if not os.access(target_file, os.W_OK):
                    raise ConfigError(f"Config file '{target_file}' is not writable")

                backup_file = f"{target_file}.backup"
                try:
                    shutil.copy2(target_file, backup_file)
                except OSError as e:
                    if self.logger:
                        self.logger.warning("Failed to create backup of config file: %s", e)

            with open(target_file, "w", encoding="utf-8") as f:
                self.config.write(f)

            if self.logger:
                self.logger.info("Configuration saved to: %s", target_file)

        except PermissionError as e:
            raise ConfigError(f"Permission denied when writing to config file '{target_file}': {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to save configuration file '{target_file}': {e}") from e

    def reload(self) -> None:
        """Reloads configuration from the original file.

        Raises:
            ConfigFileError: If file cannot be reloaded.
            ConfigValidationError: If reloaded config is invalid.
        """
        old_state = dict(self.__dict__)
        try:
            self.__init__(self.config_file)
        except ConfigError:
            # Restore previous state if reload fails
            self.__dict__.clear()
            self.__dict__.update(old_state)
            raise

        if self.logger:
            self.logger.info("Configuration reloaded successfully")
