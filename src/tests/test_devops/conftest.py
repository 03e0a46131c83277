from __future__ import annotations

import pytest


@pytest.fixture()
def no_sleep(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Record retry delays instead of sleeping."""
    import adomcp.devops.client as client_module

    delays: list[float] = []
    monkeypatch.setattr(client_module.time, "sleep", delays.append)
    return delays
