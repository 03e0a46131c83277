from typing import Annotated

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from .base import Connect, run_with_client


def register(server: FastMCP, connect: Connect) -> None:
    @server.tool(
        name="repo_list_repos_by_project",
        description="List the Git repositories of a project.",
    )
    async def list_repos_by_project(
        ctx: Context,
        project: Annotated[str, Field(description="Project name or id")],
    ) -> str:
        def call(c):
            repos = c.get(f"{project}/_apis/git/repositories")["value"]
            return [
                {
                    "id": r.get("id"),
                    "name": r.get("name"),
                    "defaultBranch": r.get("defaultBranch"),
                    "webUrl": r.get("webUrl"),
                    "isDisabled": r.get("isDisabled", False),
                }
                for r in repos
            ]

        return await run_with_client(connect, ctx, call)

    @server.tool(
        name="repo_list_pull_requests_by_repo",
        description="List pull requests of a repository.",
    )
    async def list_pull_requests_by_repo(
        ctx: Context,
        project: Annotated[str, Field(description="Project name or id")],
        repository: Annotated[str, Field(description="Repository name or id")],
        status: Annotated[
            str, Field(description="active, abandoned, completed or all")
        ] = "active",
        top: int = 100,
        skip: int = 0,
    ) -> str:
        params = {"searchCriteria.status": status, "$top": top, "$skip": skip}
        return await run_with_client(
            connect,
            ctx,
            lambda c: c.get(
                f"{project}/_apis/git/repositories/{repository}/pullrequests",
                params=params,
            )["value"],
        )
