"""Lookup of the Entra tenant that owns an Azure DevOps organization.

Tenant ids (never tokens) are cached in a small JSON file in the system temp
directory so that repeated launches do not hit the network.
"""

from __future__ import annotations

import json
import logging
import tempfile
import time
from pathlib import Path
from typing import Final

import requests

logger = logging.getLogger(__name__)

TENANT_HEADER: Final[str] = "x-vss-resourcetenant"
EMPTY_TENANT: Final[str] = "00000000-0000-0000-0000-000000000000"
CACHE_TTL_SECONDS: Final[int] = 7 * 24 * 60 * 60
CACHE_FILE_NAME: Final[str] = ".adomcp_org_tenants.json"


def default_cache_path() -> Path:
    return Path(tempfile.gettempdir()) / CACHE_FILE_NAME


def _load_cache(path: Path) -> dict[str, dict]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("Ignoring unreadable tenant cache %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _valid_entry(entry: object) -> dict | None:
    """Return ``entry`` if it has a str ``tenant_id`` and numeric ``refreshed_on``."""
    if not isinstance(entry, dict):
        return None
    tenant_id = entry.get("tenant_id")
    refreshed_on = entry.get("refreshed_on")
    if not isinstance(tenant_id, str) or not tenant_id:
        return None
    if isinstance(refreshed_on, bool) or not isinstance(refreshed_on, (int, float)):
        return None
    return entry


def _save_cache(path: Path, cache: dict[str, dict]) -> None:
    try:
        path.write_text(json.dumps(cache, indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not write tenant cache %s: %s", path, exc)


def fetch_org_tenant(organization: str, *, timeout: float = 10.0) -> str | None:
    """Ask the identity service which tenant backs ``organization``."""
    url = f"https://vssps.dev.azure.com/{organization}"
    response = requests.head(url, timeout=timeout, allow_redirects=False)
    tenant = response.headers.get(TENANT_HEADER)
    if not tenant or tenant == EMPTY_TENANT:
        return None
    return tenant


def lookup_org_tenant(
    organization: str,
    *,
    cache_path: Path | None = None,
    now: float | None = None,
) -> str | None:
    """Return the tenant id for ``organization`` or ``None`` if unknown.

    A cached value younger than a week is returned without a request. Network
    failures are logged and yield ``None`` so the caller can fall back to an
    operator-supplied tenant.
    """
    path = cache_path or default_cache_path()
    now = time.time() if now is None else now
    key = organization.lower()

    cache = _load_cache(path)
    entry = _valid_entry(cache.get(key))
    if entry is None and key in cache:
        logger.debug("Ignoring malformed tenant cache entry for %s", organization)
    if entry and now - entry["refreshed_on"] < CACHE_TTL_SECONDS:
        logger.debug("Using cached tenant for %s", organization)
        return entry["tenant_id"]

    try:
        tenant_id = fetch_org_tenant(organization)
    except requests.RequestException as exc:
        logger.warning("Failed to look up tenant for %s: %s", organization, exc)
        return entry["tenant_id"] if entry else None

    if tenant_id:
        cache[key] = {"tenant_id": tenant_id, "refreshed_on": now}
        _save_cache(path, cache)
    return tenant_id
