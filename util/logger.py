# util/logger.py
import logging
import sys
from util.enums import Color

_LEVEL_COLORS: dict[int, Color] = {
    logging.DEBUG: Color.BLUE,
    logging.INFO: Color.GREEN,
    logging.WARNING: Color.YELLOW,
    logging.ERROR: Color.RED,
    logging.CRITICAL: Color.MAGENTA,
}

LOG_FORMAT = "%(asctime)s %(name)s: %(message)s"


class ColorFormatter(logging.Formatter):
    """Prefix each record with its level name, colored like the startup banners."""

    def __init__(self, use_color: bool = True) -> None:
        super().__init__(LOG_FORMAT, datefmt="%H:%M:%S")
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if not self._use_color:
            return f"{record.levelname:<8} {line}"
        color = _LEVEL_COLORS.get(record.levelno, Color.RESET)
        return f"{color}{record.levelname:<8}{Color.RESET} {line}"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the root logger once. Calling again only updates the level.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not any(getattr(h, "_evaluation_handler", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorFormatter(use_color=sys.stderr.isatty()))
        handler._evaluation_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
