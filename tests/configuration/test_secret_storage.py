"""Configuration security behavior for local secret storage."""

import json

import keyring
from keyring.errors import NoKeyringError, PasswordDeleteError

from conftest import FakeSecretStore
from spotify_quiz.adapters.config.json_config_adapter import JsonConfigAdapter
from spotify_quiz.adapters.config.secret_store import KeyringSecretStore


def test_client_secret_goes_to_secret_store_when_available(tmp_path):
    secret_store = FakeSecretStore(available=True)
    config_path = tmp_path / "config.json"
    adapter = JsonConfigAdapter(path=str(config_path), secret_store=secret_store)

    adapter.save({"spotify_client_id": "client-id", "spotify_client_secret": "spotify-secret"})

    on_disk = json.loads(config_path.read_text(encoding="utf-8"))
    loaded = adapter.load()

    assert on_disk["spotify_client_id"] == "client-id"
    assert on_disk["spotify_client_secret"] == ""
    assert secret_store.data["spotify_client_secret"] == "spotify-secret"
    assert loaded["spotify_client_secret"] == "spotify-secret"


def test_client_secret_falls_back_to_plaintext_if_secret_store_unavailable(tmp_path):
    secret_store = FakeSecretStore(available=False)
    config_path = tmp_path / "config.json"
    adapter = JsonConfigAdapter(path=str(config_path), secret_store=secret_store)

    adapter.save({"spotify_client_id": "client-id", "spotify_client_secret": "spotify-secret"})

    on_disk = json.loads(config_path.read_text(encoding="utf-8"))
    loaded = adapter.load()

    assert on_disk["spotify_client_secret"] == "spotify-secret"
    assert loaded["spotify_client_secret"] == "spotify-secret"


def test_keyring_store_reports_unavailable_backend(monkeypatch):
    def no_backend(*_args):
        raise NoKeyringError("no backend")

    monkeypatch.setattr(keyring, "get_password", no_backend)
    monkeypatch.setattr(keyring, "set_password", no_backend)
    store = KeyringSecretStore(service_name="test-service")

    assert store.get("spotify_client_secret") is None
    assert store.set("spotify_client_secret", "value") is False


def test_keyring_store_clearing_an_unknown_key_succeeds(monkeypatch):
    def nothing_stored(*_args):
        raise PasswordDeleteError("not found")

    monkeypatch.setattr(keyring, "delete_password", nothing_stored)

    assert KeyringSecretStore(service_name="test-service").set("spotify_client_secret", "") is True
