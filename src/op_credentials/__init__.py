# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
op-credentials
"""

__version__ = "0.1.0"

from .command import CommandBuilder
from .config import VaultConfig
from .credentials import CredentialsProtocol, MappingCredentials
from .environment import EnvironmentClassifier, NamedEnvironment, RuntimeContext
from .errors import MalformedOutput, OpCredentialsError, SecretNotFound, SubprocessFailure, VaultEmptyResult
from .parser import parse_op_output
from .runner import CommandRunner, SubprocessRunner
from .store import SecretStore, get_secret_store, reset_secret_store
from .utils.logger import setup_logging
from .vault import LoadState, Vault

__all__ = [
    "Vault",
    "LoadState",
    "VaultConfig",
    "CommandBuilder",
    "CommandRunner",
    "SubprocessRunner",
    "CredentialsProtocol",
    "MappingCredentials",
    "EnvironmentClassifier",
    "NamedEnvironment",
    "RuntimeContext",
    "SecretStore",
    "get_secret_store",
    "reset_secret_store",
    "parse_op_output",
    "setup_logging",
    "OpCredentialsError",
    "SubprocessFailure",
    "MalformedOutput",
    "VaultEmptyResult",
    "SecretNotFound",
]
