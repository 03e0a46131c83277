from typing import Annotated

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from .base import Connect, run_with_client


def register(server: FastMCP, connect: Connect) -> None:
    @server.tool(
        name="build_get_definitions",
        description="List the build definitions of a project.",
    )
    async def get_definitions(
        ctx: Context,
        project: Annotated[str, Field(description="Project name or id")],
        name: Annotated[str | None, Field(description="Filter by name")] = None,
        top: int | None = None,
    ) -> str:
        params = {"name": name, "$top": top}
        return await run_with_client(
            connect,
            ctx,
            lambda c: list(
                c.get_paged(
                    f"{project}/_apis/build/definitions", params=params, limit=top
                )
            ),
        )

    @server.tool(
        name="build_get_builds",
        description="List builds of a project, newest first.",
    )
    async def get_builds(
        ctx: Context,
        project: Annotated[str, Field(description="Project name or id")],
        definitions: Annotated[
            list[int] | None, Field(description="Only builds of these definitions")
        ] = None,
        branch_name: str | None = None,
        status_filter: Annotated[
            str | None, Field(description="e.g. completed, inProgress, notStarted")
        ] = None,
        top: int = 50,
    ) -> str:
        params = {
            "definitions": ",".join(str(d) for d in definitions) if definitions else None,
            "branchName": branch_name,
            "statusFilter": status_filter,
            "queryOrder": "queueTimeDescending",
            "$top": top,
        }
        return await run_with_client(
            connect,
            ctx,
            lambda c: c.get(f"{project}/_apis/build/builds", params=params)["value"],
        )
