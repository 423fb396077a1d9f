from __future__ import annotations

import pytest

from apps.api import main as api_main
from pdf_content.config.settings import Settings, load_settings
from pdf_content.infrastructure.pdf.text_extractor import PypdfTextExtractor
from pdf_content.infrastructure.store.in_memory_content_store import InMemoryContentStore


def _capture_uvicorn_run(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    captured: dict[str, object] = {}

    def _fake_run(app: str, **kwargs: object) -> None:
        captured["app"] = app
        captured["kwargs"] = kwargs

    monkeypatch.setattr(
        api_main,
        "uvicorn",
        type("UvicornStub", (), {"run": _fake_run}),
        raising=False,
    )
    return captured


def test_main_starts_uvicorn_with_factory_on_default_port(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setattr(api_main, "load_settings", lambda: Settings(_env_file=None))
    captured = _capture_uvicorn_run(monkeypatch)

    api_main.main()

    assert captured["app"] == "apps.api.main:create_app"
    assert captured["kwargs"] == {"host": "0.0.0.0", "port": 5000, "factory": True}


def test_main_uses_port_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "7123")
    monkeypatch.setattr(api_main, "load_settings", lambda: Settings(_env_file=None))
    captured = _capture_uvicorn_run(monkeypatch)

    api_main.main()

    assert captured["kwargs"] == {"host": "0.0.0.0", "port": 7123, "factory": True}


def test_create_app_exposes_pdf_content_route_paths() -> None:
    app = api_main.create_app(settings=Settings(_env_file=None))

    paths = app.openapi()["paths"]

    assert "post" in paths["/api/upload-pdf"]
    assert "get" in paths["/api/get-pdf-content/{content_id}"]


def test_create_app_builds_default_dependencies() -> None:
    load_settings.cache_clear()
    try:
        app = api_main.create_app()
    finally:
        load_settings.cache_clear()

    assert isinstance(app.state.content_store, InMemoryContentStore)


def test_each_app_gets_its_own_store_unless_injected() -> None:
    settings = Settings(_env_file=None)
    shared_store = InMemoryContentStore()

    first = api_main.create_app(settings=settings)
    second = api_main.create_app(settings=settings)
    injected = api_main.create_app(
        settings=settings,
        content_store=shared_store,
        text_extractor=PypdfTextExtractor(),
    )

    assert first.state.content_store is not second.state.content_store
    assert injected.state.content_store is shared_store
