from __future__ import annotations

from types import ModuleType
from typing import Any

import pytest


class _Recorder:
    """Factory to create recorder classes that capture init kwargs."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.cls = self._make(name)

    @staticmethod
    def _make(name: str):
        class _C:
            last_args: tuple[Any, ...] | None = None
            last_kwargs: dict[str, Any] | None = None
            call_count: int = 0

            def __init__(self, *args: Any, **kwargs: Any) -> None:
                type(self).last_args = args
                type(self).last_kwargs = dict(kwargs)
                type(self).call_count += 1

            def get_token(self, *scopes: str, **kwargs: Any):
                raise AssertionError("recorder credentials never issue tokens")

        _C.__name__ = name
        _C.__qualname__ = name
        return _C


@pytest.fixture()
def recorded_credentials(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    """Replace the azure-identity classes used by the factory with recorders.

    Returns:
        dict[str, Any]: Recorder classes keyed by credential class name.
    """
    import adomcp.auth.factory as factory

    names = [
        "AzureCliCredential",
        "EnvironmentCredential",
        "InteractiveBrowserCredential",
    ]
    recorders = {n: _Recorder(n).cls for n in names}
    for n, cls in recorders.items():
        monkeypatch.setattr(factory, n, cls)
    return recorders


@pytest.fixture()
def factory_module(recorded_credentials: dict[str, Any]) -> ModuleType:
    """The factory module with recorders installed."""
    import adomcp.auth.factory as factory

    return factory
