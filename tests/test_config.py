"""Tests for settings loading and service wiring."""

import os

import pytest

from userdir.application import DirectoryService
from userdir.domain import User
from userdir.infrastructure.config import Settings, build_service, load_env_file, load_settings


def test_defaults():
    settings = load_settings({})
    assert settings == Settings()
    assert settings.retry_delay == 5.0
    assert settings.store == "neo4j"
    assert settings.neo4j_uri == "bolt://localhost:7687"


def test_values_are_read_and_stripped():
    settings = load_settings(
        {
            "NEO4J_URI": " bolt://db:7687 ",
            "NEO4J_USER": "admin",
            "NEO4J_PASSWORD": "secret",
            "USERDIR_RETRY_DELAY": "0.5",
            "USERDIR_STORE": "Memory",
        }
    )
    assert settings.neo4j_uri == "bolt://db:7687"
    assert settings.neo4j_user == "admin"
    assert settings.neo4j_password == "secret"
    assert settings.retry_delay == 0.5
    assert settings.store == "memory"


@pytest.mark.parametrize("value", ["soon", "-1"])
def test_invalid_retry_delay(value):
    with pytest.raises(ValueError):
        load_settings({"USERDIR_RETRY_DELAY": value})


def test_invalid_store():
    with pytest.raises(ValueError):
        load_settings({"USERDIR_STORE": "postgres"})


def test_env_file_is_loaded(tmp_path, monkeypatch):
    from userdir.infrastructure import config

    monkeypatch.setattr(config, "_REPO_ROOT", tmp_path / "missing")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("USERDIR_RETRY_DELAY", raising=False)
    (tmp_path / ".env").write_text("USERDIR_RETRY_DELAY=2\n")

    try:
        assert load_env_file() == tmp_path / ".env"
        assert load_settings().retry_delay == 2.0
    finally:
        os.environ.pop("USERDIR_RETRY_DELAY", None)


def test_build_memory_service():
    service = build_service(Settings(store="memory", retry_delay=0))
    assert isinstance(service, DirectoryService)
    user = User(id="ann", name="Ann", phone="555")
    service.create_user(user).result(timeout=5)
    assert service.duplicate_user("ann") == "ann_"
    assert service.make_business_card("ann_") == "Name: Ann\nPhone: 555"


def test_build_neo4j_service_requires_driver():
    with pytest.raises(ValueError):
        build_service(Settings(store="neo4j"))
