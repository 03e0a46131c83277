from __future__ import annotations

from typing import Final, Protocol

PRODUCT_NAME: Final[str] = "AzureDevOps.MCP"


class ClientInfo(Protocol):
    """Anything carrying a peer name and version, e.g. ``mcp.types.Implementation``."""

    name: str
    version: str


class UserAgentComposer:
    """Builds the User-Agent sent with every Azure DevOps request.

    The product part is fixed at construction. The MCP client's identity is
    only known once the protocol handshake has completed, so it is filled in
    later through :meth:`append_client_info`. The composed string is
    recomputed on every read.
    """

    def __init__(self, product_version: str) -> None:
        self._product_version = product_version
        self._client_info: str | None = None

    @property
    def product_version(self) -> str:
        return self._product_version

    @property
    def has_client_info(self) -> bool:
        return self._client_info is not None

    def append_client_info(self, info: ClientInfo | None) -> None:
        """Record the peer client's ``name/version``.

        Later calls overwrite the recorded value. ``None`` or an info object
        without both name and version is ignored.
        """
        name = getattr(info, "name", None)
        version = getattr(info, "version", None)
        if not name or not version:
            return
        self._client_info = f"{name}/{version}"

    def current(self) -> str:
        agent = f"{PRODUCT_NAME}/{self._product_version}"
        if self._client_info:
            agent += f" ({self._client_info})"
        return agent

    @property
    def user_agent(self) -> str:
        return self.current()
