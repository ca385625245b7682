import logging

from swing_academy import config
import swing_academy.logger as logger


def test_setup_creates_log_file(fresh_logging) -> None:
    path = logger.setup_logging(fresh_logging)
    assert path.parent == fresh_logging
    assert path.name.startswith("academy_") and path.suffix == ".log"
    assert path.exists()


def test_setup_is_idempotent(fresh_logging) -> None:
    first = logger.setup_logging(fresh_logging)
    count = len(logging.getLogger().handlers)
    second = logger.setup_logging(fresh_logging / "elsewhere")
    assert second == first
    assert len(logging.getLogger().handlers) == count
    assert not (fresh_logging / "elsewhere").exists()


def test_debug_records_reach_file(fresh_logging) -> None:
    path = logger.setup_logging(fresh_logging)
    logger.get_logger("swing_academy.tests").debug("position sized: %d shares", 100)
    for h in logging.getLogger().handlers:
        h.flush()
    assert "position sized: 100 shares" in path.read_text(encoding="utf-8")


def test_noisy_loggers_silenced(fresh_logging) -> None:
    logger.setup_logging(fresh_logging)
    assert logging.getLogger("streamlit").level == logging.ERROR


def test_default_log_dir_follows_working_directory(fresh_logging, monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    assert not config.LOG_DIR.is_absolute()
    path = logger.setup_logging(config.LOG_DIR)
    assert path.resolve().parent == (tmp_path / "logs").resolve()
