from typing import Annotated

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from .base import Connect, run_with_client


def register(server: FastMCP, connect: Connect) -> None:
    @server.tool(
        name="work_list_team_iterations",
        description="List the iterations assigned to a team.",
    )
    async def list_team_iterations(
        ctx: Context,
        project: Annotated[str, Field(description="Project name or id")],
        team: Annotated[str, Field(description="Team name or id")],
        timeframe: Annotated[
            str | None, Field(description="Only 'current' is supported by the API")
        ] = None,
    ) -> str:
        return await run_with_client(
            connect,
            ctx,
            lambda c: c.get(
                f"{project}/{team}/_apis/work/teamsettings/iterations",
                params={"$timeframe": timeframe},
            )["value"],
        )
