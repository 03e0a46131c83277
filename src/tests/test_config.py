from __future__ import annotations

import pytest
from pydantic import SecretStr

from adomcp.auth.config import AuthStrategy
from adomcp.config import ServerConfig


def test_defaults__cloud_url_interactive_all_domains() -> None:
    cfg = ServerConfig(organization="contoso")

    assert cfg.org_url == "https://dev.azure.com/contoso"
    assert cfg.authentication is AuthStrategy.INTERACTIVE
    assert cfg.domains == ["all"]
    assert cfg.static_credential is None
    assert cfg.log_level == "INFO"


def test_default_strategy__codespace_uses_azcli(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODESPACES", "true")
    monkeypatch.setenv("CODESPACE_NAME", "fluffy-train")

    assert ServerConfig(organization="contoso").authentication is AuthStrategy.AZCLI


def test_server_url__overrides_template_and_must_be_absolute() -> None:
    cfg = ServerConfig(
        organization="DefaultCollection",
        server_url="https://tfs.example.org/tfs/DefaultCollection/",
    )
    assert cfg.org_url == "https://tfs.example.org/tfs/DefaultCollection"

    with pytest.raises(ValueError, match="must be an absolute URL"):
        ServerConfig(organization="contoso", server_url="tfs.example.org")


@pytest.mark.parametrize("bad", ["", "   ", "contoso/project"])
def test_organization__rejects_invalid_names(bad: str) -> None:
    with pytest.raises(ValueError, match="Invalid organization name"):
        ServerConfig(organization=bad)


def test_pat_strategy__requires_token() -> None:
    """PAT must have a non-empty pat_token."""
    with pytest.raises(ValueError, match="pat authentication requires"):
        ServerConfig(organization="contoso", authentication="pat")

    with pytest.raises(ValueError, match="pat authentication requires"):
        ServerConfig(
            organization="contoso", authentication="pat", pat_token=SecretStr("")
        )

    cfg = ServerConfig(organization="contoso", authentication="pat", pat_token="p4t")
    assert cfg.static_credential == "p4t"
    assert "p4t" not in repr(cfg)


def test_unknown_strategy__rejected() -> None:
    with pytest.raises(ValueError):
        ServerConfig(organization="contoso", authentication="oauth")


def test_env_aliases(monkeypatch: pytest.MonkeyPatch) -> None:
    """Validate env alias reading, including comma-separated domains."""
    monkeypatch.setenv("ADO_ORGANIZATION", "fabrikam")
    monkeypatch.setenv("ADO_MCP_AUTHENTICATION", "envvar")
    monkeypatch.setenv("ADO_TENANT_ID", "tenant-1")
    monkeypatch.setenv("ADO_MCP_DOMAINS", "core, work-items")
    monkeypatch.setenv("ADO_MCP_LOG_LEVEL", "debug")

    cfg = ServerConfig()
    assert cfg.organization == "fabrikam"
    assert cfg.authentication is AuthStrategy.ENVVAR
    assert cfg.tenant_id == "tenant-1"
    assert cfg.domains == ["core", "work-items"]
    assert cfg.log_level == "DEBUG"


def test_keyword_arguments__win_over_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ADO_ORGANIZATION", "fabrikam")
    monkeypatch.setenv("ADO_MCP_AUTHENTICATION", "envvar")

    cfg = ServerConfig(organization="contoso", authentication="azcli")
    assert cfg.organization == "contoso"
    assert cfg.authentication is AuthStrategy.AZCLI


def test_config_is_frozen() -> None:
    cfg = ServerConfig(organization="contoso")
    with pytest.raises(ValueError):
        cfg.organization = "other"  # type: ignore[misc]


def test_log_level__validated() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        ServerConfig(organization="contoso", log_level="chatty")
