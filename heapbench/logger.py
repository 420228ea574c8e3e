import logging

from .config import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def resolve_level(name: str):
    """Map a level name to its number; None when the name is unknown."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else None


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger("heapbench")
    # Reloading this module must not stack handlers
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)
    root.propagate = False
    _configured = True

    level = resolve_level(LOG_LEVEL)
    if level is None:
        root.setLevel(logging.WARNING)
        root.warning("Unknown HEAPBENCH_LOG_LEVEL %r, using WARNING", LOG_LEVEL)
    else:
        root.setLevel(level)


def init_logger(name: str) -> logging.Logger:
    """Return a logger under the ``heapbench`` hierarchy."""
    _configure_root()
    return logging.getLogger(name)


def set_level(level: int) -> None:
    """Change the level of every ``heapbench`` logger at once."""
    _configure_root()
    logging.getLogger("heapbench").setLevel(level)
