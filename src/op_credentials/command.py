# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""Construction of the `op` shell pipeline."""

from typing import Sequence

from op_credentials.environment import RuntimeContext


def normalize_tags(tags: Sequence[str | None] | None) -> list[str]:
    """Drop ``None`` and empty entries, preserving order. The input is not modified."""
    if tags is None:
        return []
    return [tag for tag in tags if tag]


def render_tags(tags: Sequence[str | None] | None) -> str:
    """
    Render the tag clause placed between the vault name and ``--format``.
    Always starts and ends with a single space.
    """
    cleaned = normalize_tags(tags)
    if not cleaned:
        return " "
    return f" --tags {','.join(cleaned)} "


class CommandBuilder:
    """
    Builds the `op item list | op item get` pipeline for a vault.
    """

    def __init__(self, context: RuntimeContext, op_binary: str = "op", privilege_prefix: str = "sudo -E "):
        self.context = context
        self.op_binary = op_binary
        self.privilege_prefix = privilege_prefix

    def escalation(self) -> str:
        return self.privilege_prefix if self.context.should_escalate_privilege() else ""

    def build(self, vault_name: str, tags: Sequence[str | None] | None = None) -> str:
        """
        Return the exact command line. Whitespace is significant.
        """
        sudo = self.escalation()
        op = self.op_binary
        return (
            f"{sudo}{op} item list --vault {vault_name}{render_tags(tags)}--format json"
            f" | {sudo}{op} item get - --reveal --format=json"
        )
