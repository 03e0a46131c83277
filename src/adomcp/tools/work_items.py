from typing import Annotated

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from .base import Connect, run_with_client


def register(server: FastMCP, connect: Connect) -> None:
    @server.tool(
        name="wit_get_work_item",
        description="Get a single work item by id.",
    )
    async def get_work_item(
        ctx: Context,
        project: Annotated[str, Field(description="Project name or id")],
        id: Annotated[int, Field(description="Work item id")],
        expand: Annotated[
            str | None, Field(description="none, relations, fields, links or all")
        ] = None,
    ) -> str:
        return await run_with_client(
            connect,
            ctx,
            lambda c: c.get(
                f"{project}/_apis/wit/workitems/{id}", params={"$expand": expand}
            ),
        )

    @server.tool(
        name="wit_list_work_item_comments",
        description="List the comments on a work item.",
    )
    async def list_work_item_comments(
        ctx: Context,
        project: Annotated[str, Field(description="Project name or id")],
        work_item_id: int,
        top: int | None = None,
    ) -> str:
        # Comments are still a preview API.
        return await run_with_client(
            connect,
            ctx,
            lambda c: c.get(
                f"{project}/_apis/wit/workItems/{work_item_id}/comments",
                params={"$top": top},
                api_version="7.1-preview.4",
            ),
        )
