from typing import Annotated

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from adomcp.auth.scopes import service_url

from .base import Connect, run_with_client


def register(server: FastMCP, connect: Connect) -> None:
    @server.tool(
        name="advsec_get_alerts",
        description="List Advanced Security alerts of a repository.",
    )
    async def get_alerts(
        ctx: Context,
        project: Annotated[str, Field(description="Project name or id")],
        repository: Annotated[str, Field(description="Repository name or id")],
        alert_type: Annotated[
            str | None, Field(description="code, secret or dependency")
        ] = None,
        states: Annotated[
            list[str] | None, Field(description="e.g. active, dismissed, fixed")
        ] = None,
        top: int = 100,
    ) -> str:
        params = {
            "criteria.alertType": alert_type,
            "criteria.states": ",".join(states) if states else None,
            "top": top,
        }

        def call(c):
            base = service_url(c.base_url, "advsec")
            return c.get(
                f"{base}/{project}/_apis/alert/repositories/{repository}/alerts",
                params=params,
            )["value"]

        return await run_with_client(connect, ctx, call)
