# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""Exceptions raised while loading and reading 1Password secrets."""

import json
from typing import Sequence


def format_tags(tags: Sequence[str | None] | None) -> str:
    """Render a tag list the way it appears in error messages, e.g. ``["production"]``."""
    return json.dumps(list(tags) if tags is not None else None)


class OpCredentialsError(RuntimeError):
    """Base class for every error raised by op_credentials."""


class SubprocessFailure(OpCredentialsError):
    """
    The `op` pipeline exited with a non-zero status.
    Carries the captured stderr so callers can surface it.
    """

    def __init__(self, message: str, stderr: str = "", returncode: int | None = None):
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode


class MalformedOutput(OpCredentialsError):
    """The `op` output did not contain any decodable JSON object."""


class VaultEmptyResult(OpCredentialsError):
    """The vault returned no single item for the requested tags."""

    def __init__(self, vault_name: str, tags: Sequence[str | None] | None):
        super().__init__(f"No items found in vault `{vault_name}` for tags: {format_tags(tags)}")
        self.vault_name = vault_name
        self.tags = tags


class SecretNotFound(OpCredentialsError):
    """The requested label is not present in the secret store."""

    def __init__(self, label: str):
        super().__init__(f"Secret `{label}` not found in 1Password")
        self.label = label
