from __future__ import annotations

import logging
import sys

import click
from pydantic import ValidationError

from adomcp import __version__
from adomcp.auth.config import AuthStrategy
from adomcp.config import ServerConfig
from adomcp.exceptions import BridgeError
from adomcp.server import create_server

logger = logging.getLogger("adomcp")


def setup_logging(level: str) -> None:
    """Log to stderr; stdout carries the MCP stdio transport."""
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # azure-identity logs every token request at INFO.
    logging.getLogger("azure").setLevel(logging.WARNING)


def build_config(**options: object) -> ServerConfig:
    """Create the config from CLI options, leaving unset ones to the environment."""
    given = {k: v for k, v in options.items() if v not in (None, ())}
    if "domains" in given:
        given["domains"] = list(given["domains"])
    return ServerConfig(**given)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("organization", required=False)
@click.option(
    "-d",
    "--domains",
    multiple=True,
    help="Domain(s) to enable: 'all' for everything, or specific domains like "
    "'repositories builds work'. Repeat the option or separate with commas. "
    "Defaults to 'all'.",
)
@click.option(
    "-a",
    "--authentication",
    type=click.Choice([s.value for s in AuthStrategy]),
    help="Type of authentication to use. Defaults to 'azcli' in a GitHub "
    "Codespace and 'interactive' elsewhere.",
)
@click.option(
    "-t",
    "--tenant",
    "tenant_id",
    help="Azure tenant ID (applied with 'interactive' and 'azcli').",
)
@click.option(
    "-s",
    "--server-url",
    help="Azure DevOps server URL (defaults to https://dev.azure.com/<organization>).",
)
@click.option(
    "-p",
    "--pat-token",
    help="Personal Access Token for 'pat' authentication.",
)
@click.option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR).")
@click.version_option(__version__, prog_name="adomcp")
def main(
    organization: str | None,
    domains: tuple[str, ...],
    authentication: str | None,
    tenant_id: str | None,
    server_url: str | None,
    pat_token: str | None,
    log_level: str | None,
) -> None:
    """Azure DevOps MCP Server for ORGANIZATION."""
    setup_logging(log_level or "INFO")

    try:
        config = build_config(
            organization=organization,
            domains=domains,
            authentication=authentication,
            tenant_id=tenant_id,
            server_url=server_url,
            pat_token=pat_token,
            log_level=log_level,
        )
        logging.getLogger().setLevel(config.log_level)
        server = create_server(config)
    except (BridgeError, ValidationError) as exc:
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)

    server.run("stdio")


if __name__ == "__main__":
    main()
