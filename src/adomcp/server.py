from __future__ import annotations

import logging

from mcp.server.fastmcp import Context, FastMCP

from adomcp import __version__
from adomcp.auth import AuthStrategy, create_authenticator, lookup_org_tenant
from adomcp.auth.config import TENANT_SCOPED, is_codespace
from adomcp.auth.scopes import is_cloud_url
from adomcp.config import ServerConfig
from adomcp.devops import AuthenticatedClientFactory, DevOpsClient
from adomcp.domains import resolve_domains, sorted_domains
from adomcp.tools import Connect, configure_all_tools
from adomcp.useragent import UserAgentComposer

logger = logging.getLogger(__name__)

SERVER_NAME = "Azure DevOps MCP Server"


def record_handshake(ctx: Context, composer: UserAgentComposer) -> None:
    """Feed the MCP client's self-reported identity into ``composer``.

    A tool call can only arrive after the ``initialize`` exchange, so by the
    time this runs from a request the client info is final. It is recorded
    once per session.
    """
    if composer.has_client_info:
        return
    try:
        params = ctx.session.client_params
    except ValueError:
        # Outside a request there is no session to read from.
        return
    if params is not None:
        composer.append_client_info(params.clientInfo)
        logger.info("MCP client identified as %s", composer.current())


def make_connect(
    factory: AuthenticatedClientFactory, composer: UserAgentComposer
) -> Connect:
    """Return the per-request client provider handed to the tool registrar."""

    async def connect(ctx: Context) -> DevOpsClient:
        record_handshake(ctx, composer)
        return await factory.build()

    return connect


def resolve_tenant(config: ServerConfig) -> str | None:
    """Return the tenant to scope the identity flow to.

    The organization's own tenant is preferred; the operator-supplied tenant
    is the fallback when it cannot be discovered.
    """
    if config.authentication not in TENANT_SCOPED:
        return config.tenant_id
    if not is_cloud_url(config.org_url):
        return config.tenant_id
    return lookup_org_tenant(config.organization) or config.tenant_id


def create_server(config: ServerConfig) -> FastMCP:
    """Wire configuration, authentication and tools into a FastMCP server.

    Raises:
        UnknownDomainError: If the configured domains are not all known.
        MissingCredentialError: For ``pat`` without a token.
    """
    enabled = resolve_domains(config.domains)
    tenant_id = resolve_tenant(config)

    logger.info(
        "Starting %s %s for organization %s (%s), authentication=%s, tenant=%s, "
        "domains=%s, enabled=%s, codespace=%s",
        SERVER_NAME,
        __version__,
        config.organization,
        config.org_url,
        config.authentication.value,
        tenant_id,
        config.domains,
        [d.value for d in sorted_domains(enabled)],
        is_codespace(),
    )

    composer = UserAgentComposer(__version__)
    authenticator = create_authenticator(
        config.authentication,
        tenant_id,
        config.static_credential,
        client_id=config.client_id,
    )
    factory = AuthenticatedClientFactory(
        org_url=config.org_url,
        strategy=AuthStrategy(config.authentication),
        token_provider=authenticator,
        user_agent=composer,
    )

    server = FastMCP(SERVER_NAME)
    # FastMCP takes no version argument; the low-level server reports this
    # one in the initialize result instead of the SDK version.
    server._mcp_server.version = __version__
    configure_all_tools(server, make_connect(factory, composer), enabled)
    return server
