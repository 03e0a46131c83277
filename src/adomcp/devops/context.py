from __future__ import annotations

import logging
from dataclasses import dataclass

from requests.auth import AuthBase, HTTPBasicAuth

from adomcp.auth import AuthStrategy, TokenProvider
from adomcp.useragent import UserAgentComposer

from .client import BearerAuth, DevOpsClient

logger = logging.getLogger(__name__)


def credential_handler(strategy: AuthStrategy, token: str) -> AuthBase:
    """Pick how ``token`` is attached to outbound requests.

    Personal access tokens go out as basic auth with an empty user name;
    everything else is an Entra access token sent as a bearer credential.
    """
    if strategy is AuthStrategy.PAT:
        return HTTPBasicAuth("", token)
    return BearerAuth(token)


@dataclass(frozen=True)
class AuthenticatedClientFactory:
    """Builds a fresh :class:`DevOpsClient` on every call.

    Nothing is cached: each client carries the token obtained for it and the
    User-Agent as composed at that moment.
    """

    org_url: str
    strategy: AuthStrategy
    token_provider: TokenProvider
    user_agent: UserAgentComposer

    async def build(self) -> DevOpsClient:
        # Provider errors propagate untouched to whoever asked for a client.
        token = await self.token_provider()
        auth = credential_handler(self.strategy, token)
        agent = self.user_agent.current()
        logger.debug("Connecting to %s as %s", self.org_url, agent)
        return DevOpsClient(self.org_url, auth=auth, user_agent=agent)

    async def __call__(self) -> DevOpsClient:
        return await self.build()
