"""Quiz settings stored in config.json, with the client secret kept in the OS keychain."""

import json
import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional, Protocol

from spotify_quiz import config as settings
from spotify_quiz.adapters.config.secret_store import KeyringSecretStore
from spotify_quiz.domain.ports import ConfigPort

logger = logging.getLogger("spotify_quiz.adapters.config")

CLIENT_ID = "spotify_client_id"
CLIENT_SECRET = "spotify_client_secret"
REDIRECT_URI = "spotify_redirect_uri"
QUESTIONS_FILE = "questions_file"

_DEFAULTS = {
    CLIENT_ID: "",
    CLIENT_SECRET: "",
    REDIRECT_URI: settings.SPOTIFY_REDIRECT_URI,
    QUESTIONS_FILE: "",
}


def _config_dir() -> str:
    # next to the executable when frozen by a bundler
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.getcwd()


class SecretStoreProtocol(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> bool:
        ...


@dataclass(frozen=True)
class SpotifyCredentials:
    client_id: str
    client_secret: str
    redirect_uri: str


class JsonConfigAdapter(ConfigPort):

    def __init__(self, path: str | None = None, secret_store: SecretStoreProtocol | None = None):
        self.path = path or os.path.join(_config_dir(), "config.json")
        self.secret_store = secret_store or KeyringSecretStore()

    def load(self) -> dict:
        cfg = {**_DEFAULTS, **self._read_file()}
        secret = self.secret_store.get(CLIENT_SECRET)
        if secret:
            cfg[CLIENT_SECRET] = secret
        return cfg

    def save(self, cfg: dict) -> None:
        persisted = {**_DEFAULTS, **cfg}
        persisted[CLIENT_ID] = str(persisted[CLIENT_ID] or "").strip()
        secret = str(persisted[CLIENT_SECRET] or "")
        if self.secret_store.set(CLIENT_SECRET, secret):
            persisted[CLIENT_SECRET] = ""
        else:
            logger.warning("Keychain unavailable, client secret kept in %s", self.path)
            persisted[CLIENT_SECRET] = secret

        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(persisted, f, indent=2)

    def is_configured(self) -> bool:
        creds = self.spotify_credentials()
        return bool(creds.client_id and creds.client_secret)

    def spotify_credentials(self) -> SpotifyCredentials:
        cfg = self.load()
        return SpotifyCredentials(
            client_id=str(cfg[CLIENT_ID] or "").strip(),
            client_secret=str(cfg[CLIENT_SECRET] or ""),
            redirect_uri=str(cfg[REDIRECT_URI] or "").strip() or settings.SPOTIFY_REDIRECT_URI,
        )

    def questions_file(self) -> str:
        return settings.questions_file(str(self.load()[QUESTIONS_FILE] or ""))

    def _read_file(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            # the setup form rewrites the file from defaults
            logger.warning("Ignoring unreadable config file %s", self.path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: expected an object", self.path)
            return {}
        return data
