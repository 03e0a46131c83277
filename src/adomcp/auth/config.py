from __future__ import annotations

import os
from enum import Enum
from typing import Mapping


class AuthStrategy(str, Enum):
    """Supported authentication strategies."""

    INTERACTIVE = "interactive"
    AZCLI = "azcli"
    ENV = "env"
    ENVVAR = "envvar"
    PAT = "pat"


# Strategies whose identity flow is scoped by a tenant id.
TENANT_SCOPED: frozenset[AuthStrategy] = frozenset(
    {AuthStrategy.INTERACTIVE, AuthStrategy.AZCLI}
)


def is_codespace(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when running inside a GitHub Codespace."""
    env = os.environ if environ is None else environ
    return env.get("CODESPACES") == "true" and bool(env.get("CODESPACE_NAME"))


def default_strategy(environ: Mapping[str, str] | None = None) -> AuthStrategy:
    """Pick the default strategy for the execution environment.

    A codespace has no browser to complete an interactive flow, but usually
    has a logged-in Azure CLI.
    """
    return AuthStrategy.AZCLI if is_codespace(environ) else AuthStrategy.INTERACTIVE
