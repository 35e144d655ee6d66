# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

import os
from enum import Enum
from typing import Any, Final, Mapping, Sequence

from loguru import logger
from pydantic import ValidationError

from op_credentials.command import CommandBuilder
from op_credentials.config import VaultConfig
from op_credentials.credentials import CredentialsProtocol, MappingCredentials
from op_credentials.environment import EnvironmentClassifier, RuntimeContext
from op_credentials.errors import MalformedOutput, SecretNotFound, SubprocessFailure, VaultEmptyResult, format_tags
from op_credentials.models import VaultCommandResult, VaultItem
from op_credentials.parser import parse_op_output
from op_credentials.runner import CommandRunner, SubprocessRunner
from op_credentials.store import SecretStore, get_secret_store

TagList = Sequence[str | None] | None


class _CurrentEnvironment:
    """Default for `Vault.load`: tag with the current environment name."""


_CURRENT_ENVIRONMENT: Final = _CurrentEnvironment()


class LoadState(str, Enum):
    SKIPPED = "skipped"
    LOADED = "loaded"


class Vault:
    """Loads the secrets of one 1Password vault into the secret store.

    The whole vault is fetched with a single `op` pipeline at boot, then
    individual secrets are read back with `fetch_secret`. In local-like
    environments and during asset compilation 1Password is never called.
    """

    def __init__(
        self,
        name: str,
        config: VaultConfig | None = None,
        classifier: EnvironmentClassifier | None = None,
        store: SecretStore | None = None,
        runner: CommandRunner | None = None,
        credentials: CredentialsProtocol | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """Initializes the Vault.

        Args:
            name: The 1Password vault name.
            config: Optional configuration. If not provided, it is read from the environment.
            classifier: Environment classification. Defaults to the one described by config.
            store: Secret store to populate. Defaults to the process-wide store.
            runner: Command runner. Defaults to running through the system shell.
            credentials: Host credential lookup used in local-like environments.
            environ: Variables consulted for the asset marker and local fallbacks.
        """
        self._name = name
        self.config = config or VaultConfig()
        self.classifier = classifier or self.config.classifier()
        self.store = store if store is not None else get_secret_store()
        self.runner = runner or SubprocessRunner()
        self.credentials = credentials or MappingCredentials()
        self._environ = environ
        self.context = RuntimeContext(
            self.classifier,
            asset_marker=self.config.asset_marker,
            environ=environ,
        )
        self.builder = CommandBuilder(
            self.context,
            op_binary=self.config.op_binary,
            privilege_prefix=self.config.privilege_prefix,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def environ(self) -> Mapping[str, str]:
        return self._environ if self._environ is not None else os.environ

    def load(self, tags: TagList | _CurrentEnvironment = _CURRENT_ENVIRONMENT) -> LoadState:
        """Fetch every secret of the vault and put it in the store.

        Args:
            tags: Item tags to filter on. Defaults to the current environment name.

        Returns:
            LoadState.SKIPPED when 1Password must not be called, LoadState.LOADED otherwise.

        Raises:
            SubprocessFailure: If the `op` pipeline fails.
            MalformedOutput: If its output holds no JSON object, or an item of the wrong shape.
            VaultEmptyResult: If no single item matched the tags.
        """
        if isinstance(tags, _CurrentEnvironment):
            tags = [self.classifier.name]

        if self.context.is_compiling_assets():
            logger.debug(f"Skipping vault {self._name}: compiling assets")
            return LoadState.SKIPPED
        if self.context.is_local_like():
            logger.debug(f"Skipping vault {self._name}: {self.classifier.name} environment is local")
            return LoadState.SKIPPED

        logger.debug(f"Loading vault {self._name} (console session: {self.context.within_console()})")
        result = self.retrieve(tags)
        if isinstance(result, list):
            raise VaultEmptyResult(self._name, tags)

        try:
            item = VaultItem.model_validate(result)
        except ValidationError as e:
            raise MalformedOutput(
                f"Unexpected item shape from vault `{self._name}`: {e.error_count()} invalid field(s)"
            ) from e

        fields = item.present_fields()
        for field in fields:
            self.store.put(field.label, field.value)

        logger.info(f"Loaded {len(fields)} secrets from vault {self._name}")
        logger.debug(f"Secret labels loaded from vault {self._name}: {[f.label for f in fields]}")
        return LoadState.LOADED

    def retrieve(self, tags: TagList = None) -> VaultCommandResult:
        """Run the `op` pipeline for the given tags and parse what it prints.

        Returns:
            A single item record, or a list of records when several were printed.
        """
        command = self.builder.build(self._name, tags)
        logger.info(f"Fetching vault {self._name} from 1Password for tags {format_tags(tags)}")
        try:
            output = self.runner.run(command)
        except SubprocessFailure as e:
            raise SubprocessFailure(
                f"Failed to fetch `vault: {self._name}` for `tags: {format_tags(tags)}` from 1Password: {e.stderr}",
                stderr=e.stderr,
                returncode=e.returncode,
            ) from e
        return parse_op_output(output.stdout)

    def take_secret(self, label: str) -> str:
        """Remove the secret from the store and return it."""
        try:
            return self.store.take(label)
        except SecretNotFound:
            logger.warning(f"Secret {label} requested from vault {self._name} but not loaded")
            raise

    def peek_secret(self, label: str) -> str:
        """Return the secret, leaving it in the store."""
        try:
            return self.store.peek(label)
        except SecretNotFound:
            logger.warning(f"Secret {label} requested from vault {self._name} but not loaded")
            raise

    def fetch_secret(self, label: str, default: Any = None, delete: bool = True) -> Any:
        """Read one secret.

        While compiling assets an empty string is returned. In local-like
        environments the host credentials are consulted, then the environment
        variable named after the label, then ``default``.

        Raises:
            SecretNotFound: Outside local-like environments, if the label was not loaded.
        """
        if self.context.is_compiling_assets():
            return ""
        if not self.context.is_local_like():
            return self.take_secret(label) if delete else self.peek_secret(label)
        return self.credentials.fetch(label, self.environ.get(label, default))
