"""Tests for configuration loading."""

import importlib
import sys

import pytest

from exercise_tracker.config import Settings, load_settings, parse_origins


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.setenv("MONGO_URI", "mongodb://db:27017")
    monkeypatch.delenv("PORT", raising=False)

    settings = Settings()

    assert settings.mongo_uri == "mongodb://db:27017"
    assert settings.port == 3000
    assert settings.mongo_database == "exercise_tracker"


def test_missing_mongo_uri_fails_fast(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MONGO_URI", raising=False)

    with pytest.raises(SystemExit) as excinfo:
        load_settings()

    assert excinfo.value.code == 1


def test_asgi_entrypoint_fails_fast_without_mongo_uri(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MONGO_URI", raising=False)
    monkeypatch.delitem(sys.modules, "exercise_tracker.api.asgi", raising=False)

    with pytest.raises(SystemExit) as excinfo:
        importlib.import_module("exercise_tracker.api.asgi")

    assert excinfo.value.code == 1


def test_parse_origins() -> None:
    assert parse_origins("*") == ["*"]
    assert parse_origins(" https://a.example, ,https://b.example ") == [
        "https://a.example",
        "https://b.example",
    ]
    assert parse_origins(None) == []
