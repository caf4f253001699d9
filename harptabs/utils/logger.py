import logging
import sys

VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)'
PLAIN_FORMAT = '%(message)s'


def setup_logger(level: str = 'INFO') -> logging.Logger:
    """
    Routes all harptabs logging to stdout at the named level ('DEBUG', 'INFO', 'WARNING').
    DEBUG output carries the logger name and source location; other levels print bare messages.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level '{level}'.")

    root = logging.getLogger()
    if root.hasHandlers():
        root.handlers.clear()
    root.setLevel(numeric_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(VERBOSE_FORMAT if numeric_level <= logging.DEBUG else PLAIN_FORMAT))
    root.addHandler(handler)
    return root
