"""OS keychain storage for the Spotify client secret."""

from typing import Optional

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

DEFAULT_SERVICE_NAME = "spotify-top-quiz"


class KeyringSecretStore:

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME):
        self.service_name = service_name

    def get(self, key: str) -> Optional[str]:
        try:
            return keyring.get_password(self.service_name, key)
        except KeyringError:
            return None

    def set(self, key: str, value: str) -> bool:
        """Store ``value``, or forget the key when empty. False when no keychain is usable."""
        try:
            if value:
                keyring.set_password(self.service_name, key, value)
            else:
                try:
                    keyring.delete_password(self.service_name, key)
                except PasswordDeleteError:
                    pass  # nothing stored yet
            return True
        except KeyringError:
            return False
