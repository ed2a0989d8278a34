"""Test unified logging configuration.

Tests for colour_delta.utils.logging_config:
    - setup_logging() is idempotent (no duplicated records)
    - JSON and human formats carry pushed context
    - size and time rotation pick the matching handler
    - invalid level / format / rotation mode raise ValueError
    - set_level() and shutdown() act only on the root level and own handlers
    - clamping emits a DEBUG record, never a warning

Run:
    pytest tests/test_logging.py -v
"""

import json
import logging
import logging.handlers

import pytest

from colour_delta.rgb_xyz import rgb2xyz
from colour_delta.utils import logging_config


@pytest.fixture(autouse=True)
def reset_logging():
    """Leave the root logger and context as we found them."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
    logging_config.pop_context()


def _record(msg: str) -> logging.LogRecord:
    return logging.LogRecord("colour_delta.test", logging.INFO, __file__, 1, msg, None, None)


# ============================================================================
# SETUP
# ============================================================================

def test_logging_idempotency(tmp_path):
    """Two setup calls write each record once."""
    log_path = tmp_path / "colour.log"

    for _ in range(2):
        logging_config.setup_logging(
            log_level="INFO",
            log_file=str(log_path),
            json=True,
            to_stderr=False,
            capture_warnings=False,
            context={"app": "test"}
        )
    logger = logging_config.get_logger("colour_delta.test")
    logger.info("hello")
    logger.info("world")

    lines = log_path.read_text().strip().splitlines()
    assert len(lines) == 2

    rec = json.loads(lines[0])
    assert rec["msg"] == "hello"
    assert rec["lvl"] == "INFO"
    assert rec.get("app") == "test"


def test_rotating_file_handler(tmp_path):
    info = logging_config.setup_logging(
        log_file=str(tmp_path / "logs" / "colour.log"),
        to_stderr=False,
        capture_warnings=False,
        rotate={"mode": "size", "max_bytes": 1024, "backup_count": 1}
    )
    assert isinstance(info["handlers"][0], logging.handlers.RotatingFileHandler)
    assert (tmp_path / "logs").is_dir()


def test_timed_rotating_file_handler(tmp_path):
    info = logging_config.setup_logging(
        log_file=str(tmp_path / "colour.log"),
        to_stderr=False,
        capture_warnings=False,
        rotate={"mode": "time", "when": "H", "backup_count": 2}
    )
    handler = info["handlers"][0]
    assert isinstance(handler, logging.handlers.TimedRotatingFileHandler)
    assert handler.backupCount == 2


def test_unknown_rotation_mode(tmp_path):
    with pytest.raises(ValueError, match="Unknown rotation mode"):
        logging_config.setup_logging(
            log_file=str(tmp_path / "colour.log"),
            to_stderr=False,
            rotate={"mode": "weekly"}
        )


def test_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        logging_config.setup_logging(log_level="LOUD")


# ============================================================================
# RUNTIME CONTROL
# ============================================================================

def test_set_level():
    logging_config.set_level("debug")
    assert logging.getLogger().level == logging.DEBUG
    logging_config.set_level("ERROR")
    assert logging.getLogger().level == logging.ERROR


def test_set_level_unknown():
    with pytest.raises(ValueError, match="Unknown log level"):
        logging_config.set_level("LOUD")


def test_shutdown_detaches_only_installed_handlers(tmp_path):
    """Handlers the host application added stay attached and open."""
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)

    log_path = tmp_path / "colour.log"
    info = logging_config.setup_logging(
        log_file=str(log_path),
        to_stderr=False,
        capture_warnings=False
    )
    logging_config.get_logger("colour_delta.test").info("flushed")
    logging_config.shutdown()

    assert info["handlers"][0] not in root.handlers
    assert foreign in root.handlers
    assert "flushed" in log_path.read_text()

    logging_config.shutdown()  # second call is a no-op


# ============================================================================
# FORMATTER
# ============================================================================

def test_human_format_includes_context():
    logging_config.push_context(palette="brand")
    line = logging_config.ContextFormatter("human", use_color=False).format(_record("dedupe"))
    assert "| INFO" in line
    assert "palette=brand |" in line
    assert line.endswith("dedupe")


def test_pop_context_single_key():
    logging_config.push_context(palette="brand", run=3)
    logging_config.pop_context(keys=["run"])
    payload = json.loads(logging_config.ContextFormatter("json").format(_record("x")))
    assert payload["palette"] == "brand"
    assert "run" not in payload


def test_invalid_format_mode():
    with pytest.raises(ValueError, match="Unknown format mode"):
        logging_config.ContextFormatter("xml")


# ============================================================================
# LIBRARY RECORDS
# ============================================================================

def test_clamp_logs_debug(caplog):
    """Out-of-range input is reported at DEBUG and nothing louder."""
    with caplog.at_level(logging.DEBUG, logger="colour_delta.utils.compute"):
        rgb2xyz(300, -10, 128)

    messages = [r.getMessage() for r in caplog.records]
    assert any("red value 300" in m for m in messages)
    assert any("green value -10" in m for m in messages)
    assert all(r.levelno == logging.DEBUG for r in caplog.records)


def test_in_range_input_is_silent(caplog):
    with caplog.at_level(logging.DEBUG, logger="colour_delta.utils.compute"):
        rgb2xyz(10, 20, 30)
    assert not caplog.records
