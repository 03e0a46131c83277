"""MCP bridge exposing Azure DevOps to agent sessions."""

__version__ = "0.3.0"
