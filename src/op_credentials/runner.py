# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

import subprocess
from typing import Protocol, runtime_checkable

from loguru import logger

from op_credentials.errors import SubprocessFailure
from op_credentials.models import CommandOutput


@runtime_checkable
class CommandRunner(Protocol):
    """
    Protocol for running a shell command, to allow dependency injection and testing.
    """

    def run(self, command: str) -> CommandOutput:
        """
        Run the command and return its captured output.
        Raises SubprocessFailure on a non-zero exit status.
        """
        ...


class SubprocessRunner:
    """
    Runs commands through the system shell. The `op` pipeline contains a pipe,
    so it cannot be run as an argument list.
    """

    def capture(self, command: str) -> CommandOutput:
        """
        Run the command to completion without checking its exit status.
        Blocks until the command finishes; no timeout is applied.
        """
        completed = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            text=True,
        )
        return CommandOutput(
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            returncode=completed.returncode,
        )

    def run(self, command: str) -> CommandOutput:
        output = self.capture(command)
        if not output.succeeded:
            logger.error(f"Command exited with status {output.returncode}: {output.stderr.strip()}")
            raise SubprocessFailure(
                f"Command exited with status {output.returncode}: {output.stderr}",
                stderr=output.stderr,
                returncode=output.returncode,
            )
        return output
