import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from taxapp.config import get_settings
from taxapp.lifespan import build_application_lifespan


def test_telemetry_sink_attached_and_removed(monkeypatch, tmp_path):
    monkeypatch.setenv("TELEMETRY_LOG_DIR", str(tmp_path / "logs"))
    get_settings.cache_clear()
    calls: list[str] = []

    async def on_start(app: FastAPI) -> None:
        calls.append("start")

    def on_stop(app: FastAPI) -> None:
        calls.append("stop")

    app = FastAPI(lifespan=build_application_lifespan("test-app", startup_hook=on_start, shutdown_hook=on_stop))
    base_logger = logging.getLogger("taxapp")

    with TestClient(app):
        handler = app.state.telemetry_handler
        assert handler in base_logger.handlers
        logging.getLogger("taxapp").getChild("test-app").info("hello telemetry")

    assert calls == ["start", "stop"]
    assert handler not in base_logger.handlers
    assert "hello telemetry" in (tmp_path / "logs" / "test-app.log").read_text(encoding="utf-8")
    get_settings.cache_clear()


def test_no_telemetry_without_directory(monkeypatch):
    monkeypatch.delenv("TELEMETRY_LOG_DIR", raising=False)
    get_settings.cache_clear()
    app = FastAPI(lifespan=build_application_lifespan("quiet"))

    with TestClient(app):
        assert app.state.telemetry_handler is None
        assert app.state.app_label == "quiet"
    get_settings.cache_clear()


def test_lowercase_log_level_env_starts_app(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("TELEMETRY_LOG_DIR", raising=False)
    get_settings.cache_clear()
    app = FastAPI(lifespan=build_application_lifespan("verbose"))

    with TestClient(app):
        assert app.state.settings.log_level == "DEBUG"
        assert logging.getLogger("taxapp").level == logging.DEBUG
    logging.getLogger("taxapp").setLevel(logging.NOTSET)
    get_settings.cache_clear()
