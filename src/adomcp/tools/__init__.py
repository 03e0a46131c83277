"""Tool registrar: maps enabled domains to MCP tools."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from mcp.server.fastmcp import FastMCP

from adomcp.domains import Domain, sorted_domains

from . import (
    advanced_security,
    builds,
    core,
    repositories,
    search,
    test_plans,
    wiki,
    work,
    work_items,
)
from .base import Connect, run_with_client

logger = logging.getLogger(__name__)

Registrar = Callable[[FastMCP, Connect], None]

REGISTRARS: dict[Domain, Registrar] = {
    Domain.ADVANCED_SECURITY: advanced_security.register,
    Domain.BUILDS: builds.register,
    Domain.CORE: core.register,
    Domain.REPOSITORIES: repositories.register,
    Domain.SEARCH: search.register,
    Domain.TEST_PLANS: test_plans.register,
    Domain.WIKI: wiki.register,
    Domain.WORK: work.register,
    Domain.WORK_ITEMS: work_items.register,
}


def configure_all_tools(
    server: FastMCP, connect: Connect, enabled: Iterable[Domain]
) -> list[Domain]:
    """Register the tools of every enabled domain, in registry order.

    Returns:
        The domains that were registered.
    """
    registered = sorted_domains(enabled)
    for domain in registered:
        REGISTRARS[domain](server, connect)
        logger.debug("Registered %s tools", domain.value)
    return registered


__all__ = ["Connect", "REGISTRARS", "configure_all_tools", "run_with_client"]
