import asyncio
import json
from typing import Any, Awaitable, Callable

from mcp.server.fastmcp import Context

from adomcp.devops import DevOpsClient

Connect = Callable[[Context], Awaitable[DevOpsClient]]


async def run_with_client(
    connect: Connect, ctx: Context, call: Callable[[DevOpsClient], Any]
) -> str:
    """Obtain a fresh client, run the blocking ``call`` in a thread and
    return its result as pretty-printed JSON."""
    client = await connect(ctx)
    with client:
        result = await asyncio.to_thread(call, client)
    return json.dumps(result, indent=2)
