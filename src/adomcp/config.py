from __future__ import annotations

from typing import Annotated

from pydantic import AliasChoices, Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .auth.config import AuthStrategy, default_strategy
from .auth.scopes import authority_from_url, org_url
from .domains import ALL_DOMAINS


class ServerConfig(BaseSettings):
    """Startup configuration of the bridge.

    Values come from keyword arguments (the CLI) first and from environment
    variables otherwise. The model is frozen: it is resolved once and passed
    to every component that needs it.

    Environment variables (case-insensitive):
        - ADO_ORGANIZATION
        - ADO_SERVER_URL
        - ADO_MCP_AUTHENTICATION
        - ADO_TENANT_ID
        - ADO_CLIENT_ID
        - ADO_PAT_TOKEN
        - ADO_MCP_DOMAINS (comma-separated)
        - ADO_MCP_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # The field name is part of each AliasChoices so that keyword
    # construction keeps working next to the environment names.

    organization: str = Field(
        validation_alias=AliasChoices("organization", "ADO_ORGANIZATION"),
    )
    server_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("server_url", "ADO_SERVER_URL"),
    )
    authentication: AuthStrategy = Field(
        default_factory=default_strategy,
        validation_alias=AliasChoices("authentication", "ADO_MCP_AUTHENTICATION"),
    )
    tenant_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("tenant_id", "ADO_TENANT_ID"),
    )
    client_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("client_id", "ADO_CLIENT_ID"),
    )
    pat_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("pat_token", "ADO_PAT_TOKEN"),
    )
    domains: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: [ALL_DOMAINS],
        validation_alias=AliasChoices("domains", "ADO_MCP_DOMAINS"),
    )
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("log_level", "ADO_MCP_LOG_LEVEL"),
    )

    @field_validator("organization")
    @classmethod
    def _check_organization(cls, v: str) -> str:
        v = v.strip()
        if not v or "/" in v:
            raise ValueError(f"Invalid organization name: {v!r}")
        return v

    @field_validator("server_url")
    @classmethod
    def _check_server_url(cls, v: str | None) -> str | None:
        if v:
            authority_from_url(v)
        return v or None

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @field_validator("domains", mode="before")
    @classmethod
    def _split_domains(cls, v: object) -> object:
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @model_validator(mode="after")
    def _cross_field_validation(self) -> "ServerConfig":
        """Validate required fields for the selected strategy."""
        if self.authentication is AuthStrategy.PAT and not (
            self.pat_token and self.pat_token.get_secret_value()
        ):
            raise ValueError("pat authentication requires pat_token.")
        return self

    @property
    def org_url(self) -> str:
        return org_url(self.organization, self.server_url)

    @property
    def static_credential(self) -> str | None:
        return self.pat_token.get_secret_value() if self.pat_token else None
