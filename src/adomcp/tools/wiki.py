from typing import Annotated

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from .base import Connect, run_with_client


def register(server: FastMCP, connect: Connect) -> None:
    @server.tool(
        name="wiki_list_wikis",
        description="List wikis in the organization or in one project.",
    )
    async def list_wikis(
        ctx: Context,
        project: Annotated[
            str | None, Field(description="Project name or id; omit for all")
        ] = None,
    ) -> str:
        path = f"{project}/_apis/wiki/wikis" if project else "_apis/wiki/wikis"
        return await run_with_client(connect, ctx, lambda c: c.get(path)["value"])

    @server.tool(
        name="wiki_get_page_content",
        description="Get the markdown content of a wiki page.",
    )
    async def get_page_content(
        ctx: Context,
        project: Annotated[str, Field(description="Project name or id")],
        wiki: Annotated[str, Field(description="Wiki name or id")],
        path: Annotated[str, Field(description="Page path, e.g. /Home")] = "/",
    ) -> str:
        def call(c):
            page = c.get(
                f"{project}/_apis/wiki/wikis/{wiki}/pages",
                params={"path": path, "includeContent": "true"},
            )
            return {"path": page.get("path"), "content": page.get("content", "")}

        return await run_with_client(connect, ctx, call)
