import logging
import os
import sys
from datetime import datetime
from logging import Logger
from typing import Optional

from colorama import init, Fore, Style
init(autoreset=True)

LOG_FILE_PREFIX = "reelsync_"


def create_log_directory(log_folder: Optional[str] = None) -> str:
    """
    Ensures that the log directory exists. If not, it creates it.

    Args:
        log_folder: Optional path to log folder. If None, uses platform-specific location.
    """
    if log_folder is None:
        from reelsync.utils.paths import get_logs_dir
        log_folder = str(get_logs_dir())

    if not os.path.exists(log_folder):
        os.makedirs(log_folder)
    return log_folder


def get_log_file_path(log_folder: str) -> str:
    """
    Returns a log file path with a timestamp in the name.
    Format: <log_folder>/reelsync_YYYY-mm-dd_HHMMSS.log
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    return os.path.join(log_folder, f"{LOG_FILE_PREFIX}{timestamp}.log")


def purge_old_logs(log_folder: str, keep: int = 10) -> None:
    """
    Removes older log files, keeping only the most recent 'keep' files.
    Log names embed their timestamp, so lexicographical order is chronological.
    """
    all_logs = [f for f in os.listdir(log_folder)
                if f.startswith(LOG_FILE_PREFIX) and f.endswith(".log")]
    all_logs.sort()

    for old_file in all_logs[:-keep] if keep > 0 else all_logs:
        os.remove(os.path.join(log_folder, old_file))


class ColorFormatter(logging.Formatter):
    """
    A formatter that colorizes log level names using colorama.
    """
    color_map = {
        logging.DEBUG: Fore.BLUE,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.LIGHTRED_EX,
    }

    def format(self, record):
        color = self.color_map.get(record.levelno, Fore.WHITE)
        # Copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        return super().format(record)


def init_logger(
    name: str = "ReelSyncLogger",
    log_folder: Optional[str] = None,
    console_logging: bool = True,
    file_logging: bool = False,
    level: int = logging.DEBUG
) -> Logger:
    """
    Initializes and configures the logger with the specified settings.
    :param name: The logger's name.
    :param log_folder: The folder where log files should go. If None, uses platform-specific location.
    :param console_logging: Whether to log to the console.
    :param file_logging: Whether to log to a file.
    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    :return: A configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    # Calling init_logger twice must not stack handlers
    if not logger.handlers:
        if file_logging:
            logger.addHandler(_make_file_handler(log_folder, level))

        if console_logging:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(ColorFormatter(
                fmt="%(asctime)s | %(levelname)s | %(message)s",
                datefmt="%H:%M:%S"
            ))
            logger.addHandler(console_handler)

    return logger


def _make_file_handler(log_folder: Optional[str], level: int) -> logging.FileHandler:
    log_folder = create_log_directory(log_folder)
    purge_old_logs(log_folder, keep=10)
    file_handler = logging.FileHandler(get_log_file_path(log_folder), encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    return file_handler


class Log:
    """
    Wrapper class exposing Log.info(...) style calls on top of Python's logging.
    """
    _logger: Logger = init_logger(name="ReelSyncLogger", console_logging=True, level=logging.DEBUG)
    _file_handler: Optional[logging.FileHandler] = None

    @classmethod
    def set_logger(cls, logger: Logger):
        """Replace the logger at runtime."""
        cls._logger = logger

    @classmethod
    def get_logger(cls) -> Logger:
        return cls._logger

    @classmethod
    def set_level(cls, level: str | int):
        """
        Set the logging level dynamically.

        Args:
            level: Log level as string ("DEBUG", "INFO", "WARNING", "ERROR") or int
        """
        if isinstance(level, str):
            level_map = {
                "DEBUG": logging.DEBUG,
                "INFO": logging.INFO,
                "WARNING": logging.WARNING,
                "ERROR": logging.ERROR,
                "CRITICAL": logging.CRITICAL,
            }
            level = level_map.get(level.upper(), logging.INFO)

        cls._logger.setLevel(level)
        for handler in cls._logger.handlers:
            handler.setLevel(level)

    @classmethod
    def enable_file_logging(cls, log_folder: Optional[str] = None) -> str:
        """
        Start writing a timestamped log file (old files beyond 10 are purged).

        Returns:
            Path of the log file being written.
        """
        if cls._file_handler is None:
            cls._file_handler = _make_file_handler(log_folder, cls._logger.level)
            cls._logger.addHandler(cls._file_handler)
        return cls._file_handler.baseFilename

    @classmethod
    def disable_file_logging(cls):
        if cls._file_handler is not None:
            cls._logger.removeHandler(cls._file_handler)
            cls._file_handler.close()
            cls._file_handler = None

    @classmethod
    def debug(cls, text: str):
        cls._logger.debug(text)

    @classmethod
    def info(cls, text: str):
        cls._logger.info(text)

    @classmethod
    def warning(cls, text: str, exc_info: bool = False):
        if exc_info:
            cls._logger.warning(text, exc_info=True)
        else:
            cls._logger.warning(text)

    @classmethod
    def error(cls, text: str):
        cls._logger.error(text)
