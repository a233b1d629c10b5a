import logging
from rich.logging import RichHandler

from .config import LOG_LEVEL

_configured = False

def setup_logging(level: str = None):
    """Route the package loggers through rich. Safe to call more than once."""
    global _configured
    level = (level or LOG_LEVEL).upper()
    root = logging.getLogger("calltriage")
    root.setLevel(level)
    if _configured:
        return
    handler = RichHandler(rich_tracebacks=True, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.propagate = False
    _configured = True
