# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class CredentialsProtocol(Protocol):
    """
    Protocol for the host application's own credential lookup,
    used instead of 1Password in local-like environments.
    """

    def fetch(self, label: str, fallback: Any = None) -> Any:
        """
        Return the credential stored under label, or fallback when there is none.
        """
        ...


class MappingCredentials:
    """
    Credentials held in a plain mapping, e.g. a decrypted credentials file.
    """

    def __init__(self, credentials: Mapping[str, Any] | None = None):
        self.credentials = dict(credentials or {})

    def fetch(self, label: str, fallback: Any = None) -> Any:
        return self.credentials.get(label, fallback)
