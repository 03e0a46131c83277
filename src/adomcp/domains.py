from __future__ import annotations

from enum import Enum
from typing import Final, Iterable

from .exceptions import UnknownDomainError

ALL_DOMAINS: Final[str] = "all"


class Domain(str, Enum):
    """Capability groups that can be enabled for registration."""

    ADVANCED_SECURITY = "advanced-security"
    BUILDS = "builds"
    CORE = "core"
    REPOSITORIES = "repositories"
    SEARCH = "search"
    TEST_PLANS = "test-plans"
    WIKI = "wiki"
    WORK = "work"
    WORK_ITEMS = "work-items"


def _split(requested: Iterable[str]) -> list[str]:
    names: list[str] = []
    for entry in requested:
        names.extend(part.strip() for part in entry.split(",") if part.strip())
    return names


def resolve_domains(requested: Iterable[str] | str | None) -> frozenset[Domain]:
    """Resolve the operator's domain request into the enabled set.

    Args:
        requested: Domain names, or the literal ``"all"``. A single string is
            treated as a one-element list and may be comma-separated. ``None``
            or an empty request means ``"all"``.

    Returns:
        The enabled domains. Duplicates collapse.

    Raises:
        UnknownDomainError: If any name is not in the registry. Matching is
            exact, so ``"ALL"`` or ``"Core"`` are rejected.
    """
    if requested is None:
        requested = [ALL_DOMAINS]
    elif isinstance(requested, str):
        requested = [requested]

    names = _split(requested)
    if not names:
        return frozenset(Domain)

    valid = [d.value for d in Domain]
    enabled: set[Domain] = set()
    for name in names:
        if name == ALL_DOMAINS:
            enabled.update(Domain)
            continue
        if name not in valid:
            raise UnknownDomainError(name, valid)
        enabled.add(Domain(name))
    return frozenset(enabled)


def sorted_domains(enabled: Iterable[Domain]) -> list[Domain]:
    """Return ``enabled`` in registry order."""
    members = set(enabled)
    return [d for d in Domain if d in members]
