"""
Pong View Logging

Per-module loggers with levels configurable from the environment or code.

Usage:
    from pongview.logging import get_logger

    log = get_logger('view')
    log.debug("Collision between ball and paddle")
    log.info("Window opened")

Configuration:
    Environment variables:
        PONG_LOG_LEVEL=DEBUG          # Global default level
        PONG_LOG_SCHEDULER=DEBUG      # Module-specific level
        PONG_LOG_VIEW=INFO

    Or programmatically:
        from pongview.logging import configure_logging
        configure_logging(level='DEBUG', modules={'scheduler': 'INFO'})
"""

import os
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Even more verbose than DEBUG
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)


def _load_env_config() -> None:
    """Load configuration from environment variables.

    PONG_LOG_LEVEL sets the global level, any other PONG_LOG_<MODULE>
    sets the level of one module (PONG_LOG_SCHEDULER=DEBUG -> scheduler).
    """
    if 'PONG_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['PONG_LOG_LEVEL'])

    for key, value in os.environ.items():
        if key.startswith('PONG_LOG_') and key != 'PONG_LOG_LEVEL':
            module_name = key[9:].lower()  # Remove 'PONG_LOG_' prefix
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class PongLogger:
    """Logger for one module; messages below its level are dropped."""

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        return _config['module_levels'].get(self._module_key, _config['default_level'])

    def _log(self, level: LogLevel, msg: str, *args) -> None:
        if level < self.level:
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(_format_message(self.module, level.name, msg))

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR level, followed by the current traceback."""
        self.error(msg, *args)
        tb = traceback.format_exc()
        if tb.strip() != 'NoneType: None':
            for line in tb.strip().splitlines():
                self._log(LogLevel.ERROR, line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> PongLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'view', 'scheduler', 'app')

    Returns:
        PongLogger instance for the module
    """
    return PongLogger(module)


def disable_logging() -> None:
    """Disable all logging."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
