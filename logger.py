"""
logger.py
---------
Logging for the auto-create run.

What gets logged:
    * INFO: each MySQL connect/close, the reader DDL as fetched and the
      writer DDL as executed, so a failed job shows the exact statements.
    * WARNING: rollbacks after an exception inside a DatabaseManager block.
    * ERROR: the SQL text of a failed statement.

Job files carry JDBC URLs, and those may embed ``password=`` query
parameters. Every handler on the "autocreate" root logger runs
:class:`JdbcPasswordFilter`, so such values never reach stderr or LOG_FILE.
Modules get a child logger via ``get_logger(__name__)``.
"""
from __future__ import annotations

import logging
import re
import sys
from pathlib import Path

from config import CONFIG, get_log_level

_ROOT_LOGGER_NAME = "autocreate"
_CONSOLE_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_JDBC_PASSWORD_RE = re.compile(r"(?i)(password=)[^&;\s'\"]*")

_configured = False


class JdbcPasswordFilter(logging.Filter):
    """Masks ``password=...`` parameters in the rendered log message."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = _JDBC_PASSWORD_RE.sub(r"\1***", message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def _configure_root_logger() -> None:
    """Attach the stderr handler and, with LOG_FILE set, a DEBUG file handler."""
    global _configured
    if _configured:
        return
    _configured = True

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(get_log_level())

    # Operators follow the run on stderr; stdout carries the CLI's ✓/✗ line.
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(get_log_level())
    console_handler.setFormatter(
        logging.Formatter(fmt=_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )
    console_handler.addFilter(JdbcPasswordFilter())
    root.addHandler(console_handler)

    if CONFIG.log_file:
        log_path = Path(CONFIG.log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            # Full DDL and connection trace for post-mortems
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter(fmt=_FILE_FORMAT, datefmt=_DATE_FORMAT)
            )
            file_handler.addFilter(JdbcPasswordFilter())
            root.addHandler(file_handler)
        except OSError as exc:
            root.warning("Could not create log file '%s': %s", log_path, exc)


_configure_root_logger()


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the 'autocreate' hierarchy, e.g. ``autocreate.core.database``."""
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
