# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

import os
import sys
from typing import Iterable, Mapping, Protocol, runtime_checkable

DEFAULT_LOCAL_ENVIRONMENTS = frozenset({"development", "test"})


@runtime_checkable
class EnvironmentClassifier(Protocol):
    """
    Protocol for the host application's environment classification.
    """

    @property
    def name(self) -> str:
        """The classification name, e.g. "production"."""
        ...

    def is_production(self) -> bool: ...

    def is_staging(self) -> bool: ...

    def is_development(self) -> bool: ...

    def is_test(self) -> bool: ...

    def is_local_like(self) -> bool: ...


class NamedEnvironment:
    """
    Classifier backed by a plain environment name such as "staging".
    """

    def __init__(self, name: str, local_names: Iterable[str] = DEFAULT_LOCAL_ENVIRONMENTS):
        self._name = name
        self.local_names = frozenset(local_names)

    @property
    def name(self) -> str:
        return self._name

    def is_production(self) -> bool:
        return self._name == "production"

    def is_staging(self) -> bool:
        return self._name == "staging"

    def is_development(self) -> bool:
        return self._name == "development"

    def is_test(self) -> bool:
        return self._name == "test"

    def is_local_like(self) -> bool:
        return self._name in self.local_names

    def __repr__(self) -> str:
        return f"NamedEnvironment({self._name!r})"


class RuntimeContext:
    """Answers whether vault access should happen in the current process.

    All queries are pure reads of the classifier and of the environment mapping.
    """

    def __init__(
        self,
        classifier: EnvironmentClassifier,
        asset_marker: str = "SECRET_KEY_BASE_DUMMY",
        environ: Mapping[str, str] | None = None,
    ):
        """Initializes the RuntimeContext.

        Args:
            classifier: The host environment classification.
            asset_marker: Variable whose presence means static assets are being compiled.
            environ: Variables to consult. Defaults to ``os.environ``, read at query time.
        """
        self.classifier = classifier
        self.asset_marker = asset_marker
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return self._environ if self._environ is not None else os.environ

    def is_local_like(self) -> bool:
        return self.classifier.is_local_like()

    def is_compiling_assets(self) -> bool:
        return self.environ.get(self.asset_marker) is not None

    def should_escalate_privilege(self) -> bool:
        return self.classifier.is_production() or self.classifier.is_staging()

    def within_console(self) -> bool:
        # Interactive interpreter session (REPL or `python -i`).
        return hasattr(sys, "ps1") or bool(sys.flags.interactive)
