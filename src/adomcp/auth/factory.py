from __future__ import annotations

import asyncio
import logging
import os
from typing import Awaitable, Callable, Final

from azure.core.credentials import TokenCredential
from azure.core.exceptions import ClientAuthenticationError
from azure.identity import (
    AzureCliCredential,
    CredentialUnavailableError,
    EnvironmentCredential,
    InteractiveBrowserCredential,
)

from adomcp.exceptions import AuthFailedError, MissingCredentialError

from .config import AuthStrategy
from .scopes import AZURE_DEVOPS_SCOPE

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Awaitable[str]]

TOKEN_ENV_VAR: Final[str] = "ADO_MCP_AUTH_TOKEN"


def get_credential(
    strategy: AuthStrategy,
    tenant_id: str | None = None,
    client_id: str | None = None,
) -> TokenCredential:
    """Construct the :class:`TokenCredential` backing an Azure-based strategy.

    Args:
        strategy: One of ``interactive``, ``azcli`` or ``env``.
        tenant_id: Tenant to scope the identity flow to. Ignored by ``env``,
            which reads its tenant from the environment.
        client_id: Public client id for the interactive flow. Defaults to the
            identity library's own developer sign-on client.

    Returns:
        A concrete :class:`TokenCredential`.

    Raises:
        ValueError: For strategies that are not backed by azure-identity.
    """
    match strategy:
        case AuthStrategy.INTERACTIVE:
            kwargs = {}
            if tenant_id:
                kwargs["tenant_id"] = tenant_id
            if client_id:
                kwargs["client_id"] = client_id
            return InteractiveBrowserCredential(**kwargs)
        case AuthStrategy.AZCLI:
            if tenant_id:
                return AzureCliCredential(tenant_id=tenant_id)
            return AzureCliCredential()
        case AuthStrategy.ENV:
            return EnvironmentCredential()
        case _:
            raise ValueError(f"{strategy.value} is not an azure-identity strategy")


def _credential_provider(
    strategy: AuthStrategy, credential: TokenCredential
) -> TokenProvider:
    async def get_token() -> str:
        try:
            # azure-identity's sync credentials block on browser prompts and
            # subprocesses; keep them off the event loop.
            access_token = await asyncio.to_thread(
                credential.get_token, AZURE_DEVOPS_SCOPE
            )
        except CredentialUnavailableError as exc:
            if strategy is AuthStrategy.ENV:
                raise MissingCredentialError(
                    "No service principal credential found in the environment "
                    "(AZURE_TENANT_ID, AZURE_CLIENT_ID, AZURE_CLIENT_SECRET)."
                ) from exc
            raise AuthFailedError(
                f"{strategy.value} authentication is not available: {exc.message}"
            ) from exc
        except ClientAuthenticationError as exc:
            raise AuthFailedError(
                f"{strategy.value} authentication failed: {exc.message}"
            ) from exc
        if not access_token or not access_token.token:
            raise AuthFailedError(
                f"{strategy.value} authentication returned no token."
            )
        return access_token.token

    return get_token


def _envvar_provider() -> TokenProvider:
    async def get_token() -> str:
        token = os.environ.get(TOKEN_ENV_VAR)
        if not token:
            raise MissingCredentialError(
                f"Environment variable {TOKEN_ENV_VAR!r} is not set or empty."
            )
        return token

    return get_token


def _static_provider(token: str) -> TokenProvider:
    async def get_token() -> str:
        return token

    return get_token


def create_authenticator(
    strategy: AuthStrategy,
    tenant_id: str | None = None,
    static_credential: str | None = None,
    *,
    client_id: str | None = None,
) -> TokenProvider:
    """Return a no-argument coroutine function yielding a fresh token.

    Args:
        strategy: The authentication strategy selected at startup.
        tenant_id: Tenant for ``interactive`` and ``azcli``.
        static_credential: Personal access token for ``pat``.
        client_id: Optional public client id for ``interactive``.

    Returns:
        A :data:`TokenProvider`.

    Raises:
        MissingCredentialError: ``pat`` was selected without a credential.
    """
    strategy = AuthStrategy(strategy)
    logger.debug("Creating %s authenticator (tenant=%s)", strategy.value, tenant_id)

    match strategy:
        case AuthStrategy.PAT:
            if not static_credential:
                raise MissingCredentialError(
                    "pat authentication requires a personal access token."
                )
            return _static_provider(static_credential)
        case AuthStrategy.ENVVAR:
            return _envvar_provider()
        case _:
            credential = get_credential(strategy, tenant_id, client_id)
            return _credential_provider(strategy, credential)
