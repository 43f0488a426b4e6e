"""Application wiring — lifespan logging setup and the uvicorn entry point."""

import logging

import glitchstore.main as main_module
from glitchstore.config import get_settings
from glitchstore.main import app, lifespan, run


def test_run_serves_app_with_configured_address(monkeypatch):
    calls = []
    monkeypatch.setattr(
        main_module.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)),
    )
    run()
    (args, kwargs), = calls
    settings = get_settings()
    assert args == (app,)
    assert kwargs["host"] == settings.host
    assert kwargs["port"] == settings.port
    assert kwargs["log_config"] is None


async def test_lifespan_installs_log_handler():
    root = logging.getLogger()
    original_level = root.level
    try:
        async with lifespan(app):
            assert any(h.get_name() == "glitchstore" for h in root.handlers)
    finally:
        for handler in list(root.handlers):
            if handler.get_name() == "glitchstore":
                root.removeHandler(handler)
        root.setLevel(original_level)


def test_routes_registered():
    paths = {route.path for route in app.routes}
    assert {"/", "/api/v1/health/", "/api/v1/health/ready"} <= paths
