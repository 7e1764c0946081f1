"""
Tests for config loading, id generation and the error taxonomy.
"""
import logging
import re
import pytest

from openmusic.exceptions import ClientError, ForbiddenError, InvariantError, NotFoundError, OpenMusicError, PersistenceError
from openmusic.utils import extract_app_params, generate_id, init_logger
from openmusic.utils.config import DEFAULT_DATABASE_URL


class TestExtractAppParams:

    def test_reads_yaml(self, tmp_path, monkeypatch):
        monkeypatch.delenv("OPENMUSIC_DATABASE_URL", raising=False)
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "paths:\n"
            "  database_url: sqlite+aiosqlite:///music.db\n"
            "debug:\n"
            "  log: true\n"
            "  log_level: DEBUG\n"
            "  log_filepath: /tmp/openmusic.log\n"
            "  db_echo: true\n"
        )

        app_params = extract_app_params(str(config_file))

        assert app_params.database_url == "sqlite+aiosqlite:///music.db"
        assert app_params.log_enabled is True
        assert app_params.log_level == logging.DEBUG
        assert app_params.log_filepath == "/tmp/openmusic.log"
        assert app_params.db_echo is True

    def test_defaults_without_file(self, monkeypatch):
        monkeypatch.delenv("OPENMUSIC_DATABASE_URL", raising=False)

        app_params = extract_app_params(None)

        assert app_params.database_url == DEFAULT_DATABASE_URL
        assert app_params.log_enabled is False
        assert app_params.log_level == logging.INFO

    def test_unknown_log_level_falls_back_to_info(self, tmp_path, monkeypatch):
        monkeypatch.delenv("OPENMUSIC_DATABASE_URL", raising=False)
        config_file = tmp_path / "config.yaml"
        config_file.write_text("debug:\n  log_level: LOUD\n")

        assert extract_app_params(str(config_file)).log_level == logging.INFO

    def test_empty_file_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        with pytest.raises(Exception):
            extract_app_params(str(config_file))

    def test_environment_overrides_database_url(self, monkeypatch):
        monkeypatch.setenv("OPENMUSIC_DATABASE_URL", "sqlite+aiosqlite:///other.db")

        assert extract_app_params(None).database_url == "sqlite+aiosqlite:///other.db"


def test_generate_id():
    first = generate_id("playlist")
    second = generate_id("playlist")

    assert re.fullmatch(r"playlist-[0-9a-f]{16}", first)
    assert first != second


def test_error_kinds_keep_their_status():
    assert NotFoundError("x").status_code == 404
    assert ForbiddenError("x").status_code == 403
    assert InvariantError("x").status_code == 400
    assert PersistenceError("x").status_code == 500
    assert issubclass(NotFoundError, ClientError)
    assert not issubclass(PersistenceError, ClientError)
    assert issubclass(PersistenceError, OpenMusicError)
    assert ForbiddenError("not yours").message == "not yours"


def test_init_logger_writes_to_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_filepath = tmp_path / "logs" / "openmusic.log"

    try:
        init_logger(str(log_filepath), logging.DEBUG, db_echo=False)
        logging.getLogger("openmusic.test").info("hello from the test")
        for handler in root.handlers:
            handler.flush()

        assert "hello from the test" in log_filepath.read_text()
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("aiosqlite").level == logging.WARNING
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
