# topmark:header:start
#
#   project      : UtilCore
#   file         : logging.py
#   file_relpath : src/utilcore/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilCore logging with a TRACE level and chalk-colored output.

This module extends the standard logging module with a custom TRACE level, a
specialized logger class and a colored formatter. Fatal conditions (resource
exhaustion, counter overflow) are reported at CRITICAL, which is the level the
rest of UtilCore refers to as *fatal*.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Any, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

ENV_LOG_LEVEL: Final[str] = "UTILCORE_LOG_LEVEL"

FATAL_RECORD_ATTR: Final[str] = "fatal"


class UtilcoreLogger(logging.Logger):
    """Logger class with a TRACE level below DEBUG and a record-marking `fatal()`."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )

    def fatal(
        self,
        msg: object,
        *args: object,
        exc_info: Any = None,
        stack_info: bool = False,
        stacklevel: int = 1,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' at CRITICAL and mark the record as fatal.

        Fatal records carry ``record.fatal = True``; they report conditions the
        caller is not expected to recover from (allocation failure, overflow).

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            exc_info (Any): Exception information, as for `logging.Logger.critical`.
            stack_info (bool): Whether to add stack information.
            stacklevel (int): Stack level of the reported caller.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(logging.CRITICAL):
            self._log(
                logging.CRITICAL,
                msg=msg,
                args=args,
                exc_info=exc_info,
                extra={**(extra or {}), FATAL_RECORD_ATTR: True},
                stack_info=stack_info,
                stacklevel=stacklevel + 1,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(UtilcoreLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records with chalk based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment or None if unset.

    Honors ``UTILCORE_LOG_LEVEL`` (e.g. "TRACE", "DEBUG", "FATAL", numeric "10").
    Unknown names resolve to None.
    """
    val = os.environ.get(ENV_LOG_LEVEL)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a log level and colored output.

    If ``level`` is None the environment is consulted via
    `resolve_env_log_level`. The default is CRITICAL so that only fatal
    conditions reach the terminal unless asked otherwise.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> UtilcoreLogger:
    """Retrieve a UtilcoreLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        UtilcoreLogger: A UtilcoreLogger instance.
    """
    return cast("UtilcoreLogger", logging.getLogger(name))
