"""
Logging configuration for the application.

``setup_logging`` attaches a console handler and, when ``LOG_FILE`` is
set, a file handler to the root logger.  The format comes from the
``LOG_FORMAT`` setting.  Configuration happens once: a logger that
already has handlers (for example one set up by uvicorn or the test
runner) is left alone.
"""

import logging
from pathlib import Path
from typing import List, Optional

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    fmt: str = DEFAULT_FORMAT,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Configure ``logger`` (the root logger by default).

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  Missing parent directories are created.
    fmt : str
        ``logging.Formatter`` format string.
    logger : Optional[logging.Logger]
        Logger to configure.

    Returns
    -------
    bool
        ``True`` if handlers were attached, ``False`` if the logger was
        already configured.
    """
    target = logger if logger is not None else logging.getLogger()
    if target.handlers:
        return False

    target.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=fmt, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        target.addHandler(handler)
    return True
