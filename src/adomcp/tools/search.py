from typing import Annotated

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from adomcp.auth.scopes import service_url

from .base import Connect, run_with_client


def register(server: FastMCP, connect: Connect) -> None:
    @server.tool(
        name="search_code",
        description="Search source code across the organization's repositories.",
    )
    async def search_code(
        ctx: Context,
        search_text: Annotated[str, Field(description="Text to search for")],
        project: Annotated[
            list[str] | None, Field(description="Restrict to these projects")
        ] = None,
        repository: Annotated[
            list[str] | None, Field(description="Restrict to these repositories")
        ] = None,
        top: int = 5,
        skip: int = 0,
    ) -> str:
        filters = {}
        if project:
            filters["Project"] = project
        if repository:
            filters["Repository"] = repository
        body = {
            "searchText": search_text,
            "$skip": skip,
            "$top": top,
            "filters": filters,
            "includeFacets": False,
        }

        def call(c):
            url = f"{service_url(c.base_url, 'almsearch')}/_apis/search/codesearchresults"
            return c.post(url, json=body)

        return await run_with_client(connect, ctx, call)
