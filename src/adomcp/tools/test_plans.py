from typing import Annotated

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from .base import Connect, run_with_client


def register(server: FastMCP, connect: Connect) -> None:
    @server.tool(
        name="testplan_list_test_plans",
        description="List the test plans of a project.",
    )
    async def list_test_plans(
        ctx: Context,
        project: Annotated[str, Field(description="Project name or id")],
        filter_active_plans: bool = True,
        include_plan_details: bool = False,
    ) -> str:
        params = {
            "filterActivePlans": str(filter_active_plans).lower(),
            "includePlanDetails": str(include_plan_details).lower(),
        }
        return await run_with_client(
            connect,
            ctx,
            lambda c: list(
                c.get_paged(f"{project}/_apis/testplan/plans", params=params)
            ),
        )
