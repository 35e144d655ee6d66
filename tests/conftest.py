from typing import Any, Callable, Generator

import pytest
from op_credentials.config import VaultConfig
from op_credentials.environment import NamedEnvironment
from op_credentials.errors import SubprocessFailure
from op_credentials.models import CommandOutput
from op_credentials.store import SecretStore, reset_secret_store
from op_credentials.vault import Vault


class FakeRunner:
    """Records commands instead of running them."""

    def __init__(self, stdout: str = '{"fields": []}', stderr: str = "", returncode: int = 0):
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
        self.commands: list[str] = []

    def run(self, command: str) -> CommandOutput:
        self.commands.append(command)
        if self.returncode != 0:
            raise SubprocessFailure("command failed", stderr=self.stderr, returncode=self.returncode)
        return CommandOutput(stdout=self.stdout, stderr=self.stderr, returncode=self.returncode)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_ENV", "OP_CREDENTIALS_ENVIRONMENT", "SECRET_KEY_BASE_DUMMY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clean_global_store() -> Generator[None, None, None]:
    reset_secret_store()
    yield
    reset_secret_store()


@pytest.fixture
def store() -> SecretStore:
    return SecretStore()


@pytest.fixture
def fake_runner() -> type[FakeRunner]:
    return FakeRunner


@pytest.fixture
def runner(fake_runner: type[FakeRunner]) -> FakeRunner:
    return fake_runner()


@pytest.fixture
def make_vault(store: SecretStore, runner: FakeRunner) -> Callable[..., Vault]:
    def _make(
        environment: str = "production",
        environ: dict[str, str] | None = None,
        name: str = "test-vault",
        **kwargs: Any,
    ) -> Vault:
        kwargs.setdefault("store", store)
        kwargs.setdefault("runner", runner)
        return Vault(
            name,
            config=VaultConfig(environment=environment),
            classifier=NamedEnvironment(environment),
            environ=environ if environ is not None else {},
            **kwargs,
        )

    return _make
