import logging

from jsendjar.config import Settings, load_settings
from jsendjar.utils.logger_util import get_logger


def test_defaults(monkeypatch):
    for key in ("JSENDJAR_LOG_LEVEL", "JSENDJAR_LOG_DIR", "JSENDJAR_ROWS_KEY"):
        monkeypatch.delenv(key, raising=False)
    assert load_settings(env_file=None) == Settings()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("JSENDJAR_LOG_LEVEL", "debug")
    monkeypatch.setenv("JSENDJAR_LOG_DIR", "")
    monkeypatch.setenv("JSENDJAR_ROWS_KEY", "items")
    s = load_settings(env_file=None)
    assert s.log_level == "DEBUG"
    assert s.log_dir == ""
    assert s.rows_key == "items"


def test_blank_rows_key_falls_back(monkeypatch):
    monkeypatch.setenv("JSENDJAR_ROWS_KEY", "  ")
    assert load_settings(env_file=None).rows_key == "rows"


def test_dotenv_file_is_read(monkeypatch, tmp_path):
    # setenv first so the value loaded from the file is rolled back afterwards
    monkeypatch.setenv("JSENDJAR_ROWS_KEY", "unused")
    monkeypatch.delenv("JSENDJAR_ROWS_KEY")
    env_file = tmp_path / ".env"
    env_file.write_text("JSENDJAR_ROWS_KEY=records\n", encoding="utf-8")
    assert load_settings(env_file=str(env_file)).rows_key == "records"


def test_get_logger_does_not_duplicate_handlers():
    a = get_logger("jsendjar.tests.dup", logging.DEBUG)
    b = get_logger("jsendjar.tests.dup", logging.INFO)
    assert a is b
    assert len(b.handlers) == 1
    assert b.level == logging.INFO
    assert b.propagate is False
