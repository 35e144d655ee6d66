from loguru import logger
from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from op_credentials.environment import NamedEnvironment


class VaultConfig(BaseSettings):
    """
    Configuration for loading secrets from 1Password.
    """

    # Environment classification name; falls back to APP_ENV.
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("OP_CREDENTIALS_ENVIRONMENT", "APP_ENV"),
    )
    asset_marker: str = "SECRET_KEY_BASE_DUMMY"

    op_binary: str = "op"
    privilege_prefix: str = "sudo -E "
    local_environments: set[str] = {"development", "test"}

    model_config = SettingsConfigDict(
        env_prefix="OP_CREDENTIALS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def warn_on_default_environment(self) -> "VaultConfig":
        if "environment" not in self.model_fields_set:
            logger.warning(
                "Neither OP_CREDENTIALS_ENVIRONMENT nor APP_ENV is set; "
                f"assuming the {self.environment!r} environment"
            )
        return self

    def classifier(self) -> NamedEnvironment:
        return NamedEnvironment(self.environment, local_names=self.local_environments)
