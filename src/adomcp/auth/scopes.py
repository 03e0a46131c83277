from typing import Final
from urllib.parse import urlparse

# Well-known resource id of Azure DevOps in Microsoft Entra ID.
AZURE_DEVOPS_SCOPE: Final[str] = "499b84ac-1321-427f-aa17-267ca6975798/.default"

CLOUD_HOST: Final[str] = "dev.azure.com"


def authority_from_url(url: str) -> str:
    """Return the URL authority (scheme + host).

    Args:
        url: Absolute server URL (e.g., "https://dev.azure.com/contoso").

    Returns:
        The "<scheme>://<host>" portion of the URL.

    Raises:
        ValueError: If ``url`` is not absolute or lacks a host.
    """
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError("url must be an absolute URL")
    return f"{parsed.scheme}://{parsed.netloc}"


def org_url(organization: str, server_url: str | None = None) -> str:
    """Return the base URL for an organization.

    An explicit ``server_url`` (Azure DevOps Server) wins over the cloud
    template ``https://dev.azure.com/<organization>``.
    """
    if server_url:
        return server_url.rstrip("/")
    return f"https://{CLOUD_HOST}/{organization}"


def is_cloud_url(url: str) -> bool:
    return urlparse(url).netloc.lower() == CLOUD_HOST


def service_url(base_url: str, service: str) -> str:
    """Return the base URL of an Azure DevOps sub-service.

    Some services (search, advanced security, identity) are hosted on
    ``<service>.dev.azure.com`` in the cloud. On-premises servers expose them
    under the collection URL itself.
    """
    if not is_cloud_url(base_url):
        return base_url.rstrip("/")
    parsed = urlparse(base_url)
    return f"{parsed.scheme}://{service}.{CLOUD_HOST}{parsed.path}".rstrip("/")
