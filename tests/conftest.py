from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from swing_academy.content import Catalog, load_catalog  # noqa: E402


@pytest.fixture
def catalog() -> Catalog:
    return load_catalog(seed=7)


@pytest.fixture
def fresh_logging(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Unconfigured logger module; handlers it adds are removed afterwards."""
    import swing_academy.logger as logger

    monkeypatch.setattr(logger, "_configured", False)
    monkeypatch.setattr(logger, "_log_path", None)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield tmp_path / "logs"
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
