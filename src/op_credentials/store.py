# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

from loguru import logger

from op_credentials.errors import SecretNotFound


class SecretStore:
    """In-memory mapping from secret label to secret value.

    Labels are shared across vaults, so two vaults loading the same label
    overwrite each other (last write wins). No locking is done: loading happens
    once at boot, and concurrent takers of one label may see SecretNotFound.
    """

    def __init__(self) -> None:
        self._secrets: dict[str, str] = {}

    def put(self, label: str, raw_value: str) -> None:
        """Store ``raw_value`` under ``label``, expanding literal ``\\n`` escapes."""
        self._secrets[label] = raw_value.replace("\\n", "\n")

    def take(self, label: str) -> str:
        """Remove and return the value for ``label``.

        Raises:
            SecretNotFound: If the label is absent.
        """
        try:
            return self._secrets.pop(label)
        except KeyError:
            raise SecretNotFound(label) from None

    def peek(self, label: str) -> str:
        """Return the value for ``label`` without removing it.

        Raises:
            SecretNotFound: If the label is absent.
        """
        try:
            return self._secrets[label]
        except KeyError:
            raise SecretNotFound(label) from None

    def labels(self) -> list[str]:
        return list(self._secrets)

    def reset(self) -> None:
        self._secrets.clear()

    def __contains__(self, label: object) -> bool:
        return label in self._secrets

    def __len__(self) -> int:
        return len(self._secrets)


_store: SecretStore | None = None


def get_secret_store() -> SecretStore:
    """Return the process-wide store, creating it on first use."""
    global _store
    if _store is None:
        _store = SecretStore()
    return _store


def reset_secret_store() -> SecretStore:
    """Replace the process-wide store with an empty one and return it."""
    global _store
    _store = SecretStore()
    logger.debug("Process-wide secret store reset")
    return _store
