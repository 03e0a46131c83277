from __future__ import annotations

import os
from typing import Iterator

import pytest

_PREFIXES = ("ADO_", "AZURE_", "CODESPACE")
# ServerConfig also accepts its bare field names from the environment.
_FIELD_NAMES = {
    "ORGANIZATION",
    "SERVER_URL",
    "AUTHENTICATION",
    "TENANT_ID",
    "CLIENT_ID",
    "PAT_TOKEN",
    "DOMAINS",
    "LOG_LEVEL",
}


@pytest.fixture(autouse=True)
def clear_bridge_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove configuration vars to prevent cross-test leakage.

    Yields:
        Iterator[None]: Context manager semantics for pytest.
    """
    to_clear = [
        k
        for k in os.environ.keys()
        if k.upper().startswith(_PREFIXES) or k.upper() in _FIELD_NAMES
    ]
    for k in to_clear:
        monkeypatch.delenv(k, raising=False)
    yield
