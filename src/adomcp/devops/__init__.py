"""Azure DevOps transport: the REST client and the factory that builds it."""

from .client import BearerAuth, DevOpsClient
from .context import AuthenticatedClientFactory, credential_handler

__all__ = [
    "BearerAuth",
    "DevOpsClient",
    "AuthenticatedClientFactory",
    "credential_handler",
]
