"""
Logging configuration for hcptf.

The package logger carries only a NullHandler until verbose output is
requested, either by ``defaults.verbose`` in the config file or by setting
``HCPTF_LOG`` to a level name.
"""

import logging

_logger = logging.getLogger("hcptf")


def enable_verbose(level: str = "DEBUG", format: str = None) -> None:
    """Enable verbose logging to stderr.

    Args:
        level: Logging level - "DEBUG", "INFO", "WARNING", "ERROR"
        format: Optional custom format string

    Example:
        enable_verbose("DEBUG")
        Router(command_paths()).translate_args(["acme", "prod"])  # logs the route
        disable_verbose()
    """
    _logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    for handler in _logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            _logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, level.upper()))

    if format is None:
        format = "[%(levelname)s] %(message)s"

    handler.setFormatter(logging.Formatter(format))
    _logger.addHandler(handler)


def disable_verbose() -> None:
    """Disable verbose logging."""
    _logger.setLevel(logging.WARNING)
    for handler in _logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            _logger.removeHandler(handler)


def is_valid_level(level: str) -> bool:
    """Return True if ``level`` names a standard logging level."""
    return isinstance(logging.getLevelName(level.upper()), int)
