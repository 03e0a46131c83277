from typing import Annotated

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from .base import Connect, run_with_client


def register(server: FastMCP, connect: Connect) -> None:
    @server.tool(
        name="core_list_projects",
        description="List the projects in the Azure DevOps organization.",
    )
    async def list_projects(
        ctx: Context,
        state_filter: Annotated[
            str, Field(description="wellFormed, createPending, deleted or all")
        ] = "wellFormed",
        top: int | None = None,
        skip: int | None = None,
    ) -> str:
        params = {"stateFilter": state_filter, "$top": top, "$skip": skip}
        return await run_with_client(
            connect,
            ctx,
            lambda c: list(c.get_paged("_apis/projects", params=params, limit=top)),
        )

    @server.tool(
        name="core_list_project_teams",
        description="List the teams of a project.",
    )
    async def list_project_teams(
        ctx: Context,
        project: Annotated[str, Field(description="Project name or id")],
        mine: bool = False,
        top: int | None = None,
    ) -> str:
        params = {"$mine": str(mine).lower(), "$top": top}
        return await run_with_client(
            connect,
            ctx,
            lambda c: c.get(f"_apis/projects/{project}/teams", params=params)["value"],
        )
