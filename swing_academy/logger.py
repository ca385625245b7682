"""
swing_academy/logger.py
=======================
Central logging setup for the academy (Streamlit page and terminal).

Two handlers per process:
  - File handler  : <log_dir>/academy_YYYY-MM-DD_HHMMSS.log, DEBUG+
  - Stream handler: stderr, WARNING+ only

Usage
-----
    from swing_academy.config import LOG_DIR
    from swing_academy.logger import get_logger, setup_logging

    setup_logging(LOG_DIR)
    log = get_logger(__name__)
    log.info("section opened: %s", section.value)

Streamlit re-executes the page script on every interaction, so repeat
calls return the first call's log file and add no handlers.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

_FMT_FILE = "%(asctime)s  %(levelname)-8s  %(name)-28s  %(message)s"
_FMT_CON  = "%(levelname)-8s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_NOISY    = ("streamlit", "watchdog", "tornado", "urllib3", "PIL")

_configured = False
_log_path: Optional[Path] = None


def setup_logging(log_dir: Path) -> Optional[Path]:
    """
    Attach a DEBUG file handler under ``log_dir`` and a WARNING stderr
    handler to the root logger. Returns the log file path.
    """
    global _configured, _log_path
    if _configured:
        return _log_path

    log_dir.mkdir(parents=True, exist_ok=True)
    path = log_dir / f"academy_{datetime.now():%Y-%m-%d_%H%M%S}.log"

    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATE_FMT))

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.WARNING)
    console.setFormatter(logging.Formatter(_FMT_CON))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.addHandler(file_handler)
    root.addHandler(console)

    for name in _NOISY:
        logging.getLogger(name).setLevel(logging.ERROR)

    _configured, _log_path = True, path
    return path


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
