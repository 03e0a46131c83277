"""Authentication helpers for the Azure DevOps connection.

Public API:
- create_authenticator() → TokenProvider
- get_credential() → TokenCredential (azure-identity backed strategies)
- AuthStrategy (enum of auth strategies)
- AZURE_DEVOPS_SCOPE (token scope for Azure DevOps)
- lookup_org_tenant() (tenant discovery by organization name)
"""

from .config import AuthStrategy, default_strategy
from .factory import TokenProvider, create_authenticator, get_credential
from .scopes import AZURE_DEVOPS_SCOPE, org_url, service_url
from .tenants import lookup_org_tenant

__all__ = [
    "AuthStrategy",
    "default_strategy",
    "TokenProvider",
    "create_authenticator",
    "get_credential",
    "AZURE_DEVOPS_SCOPE",
    "org_url",
    "service_url",
    "lookup_org_tenant",
]
