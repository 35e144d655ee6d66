# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""Data models for `op` command output and vault items."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field

# One parsed JSON object, or several when `op` printed more than one item.
VaultCommandResult = dict[str, Any] | list[dict[str, Any]]


class CommandOutput(BaseModel):
    """Captured result of a finished shell command."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


class SecretField(BaseModel):
    """A single field of a revealed 1Password item."""

    model_config = ConfigDict(extra="ignore")

    label: str
    value: str | None = None


class VaultItem(BaseModel):
    """A revealed 1Password item. Only ``fields`` is read; other keys are kept as extras."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    secret_fields: List[SecretField] = Field(default_factory=list, alias="fields")

    def present_fields(self) -> List[SecretField]:
        """Fields that carry a value; ``null`` values are dropped."""
        return [f for f in self.secret_fields if f.value is not None]
