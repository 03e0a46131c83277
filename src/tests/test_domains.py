from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from adomcp.domains import Domain, resolve_domains, sorted_domains
from adomcp.exceptions import UnknownDomainError

names = st.sampled_from([d.value for d in Domain])


def test_resolve__all_enables_every_domain() -> None:
    assert resolve_domains(["all"]) == frozenset(Domain)
    assert resolve_domains("all") == frozenset(Domain)


@pytest.mark.parametrize("variant", ["ALL", "All", " all-", "al"])
def test_resolve__all_is_exact_match(variant: str) -> None:
    with pytest.raises(UnknownDomainError):
        resolve_domains([variant])


def test_resolve__duplicates_collapse() -> None:
    enabled = resolve_domains(["repositories", "builds", "repositories"])
    assert enabled == {Domain.REPOSITORIES, Domain.BUILDS}
    assert len(enabled) == 2


def test_resolve__unknown_domain_names_value_and_options() -> None:
    with pytest.raises(UnknownDomainError) as info:
        resolve_domains(["core", "releases", "wiki"])

    err = info.value
    assert err.value == "releases"
    assert "'releases'" in str(err)
    for d in Domain:
        assert repr(d.value) in str(err)
    assert isinstance(err, ValueError)


@pytest.mark.parametrize("bad", ["Core", "work_items", "WIKI"])
def test_resolve__names_are_case_sensitive(bad: str) -> None:
    with pytest.raises(UnknownDomainError):
        resolve_domains([bad])


@given(st.lists(names, min_size=1), st.text(min_size=1).filter(lambda s: "," not in s))
def test_resolve__any_unknown_name_fails_whole_request(
    valid: list[str], junk: str
) -> None:
    if junk.strip() in {d.value for d in Domain} | {"all"} or not junk.strip():
        return
    with pytest.raises(UnknownDomainError):
        resolve_domains([*valid, junk])


@given(st.lists(names, min_size=1), st.randoms())
def test_resolve__order_independent(requested: list[str], rnd) -> None:
    shuffled = list(requested)
    rnd.shuffle(shuffled)
    assert resolve_domains(requested) == resolve_domains(shuffled)
    assert resolve_domains(requested) == {Domain(n) for n in requested}


def test_resolve__comma_separated_and_empty() -> None:
    assert resolve_domains(["core,work", "wiki"]) == {
        Domain.CORE,
        Domain.WORK,
        Domain.WIKI,
    }
    assert resolve_domains([]) == frozenset(Domain)
    assert resolve_domains(None) == frozenset(Domain)


def test_resolve__all_alongside_names() -> None:
    assert resolve_domains(["core", "all"]) == frozenset(Domain)


def test_sorted_domains__registry_order() -> None:
    assert sorted_domains({Domain.WORK, Domain.BUILDS, Domain.CORE}) == [
        Domain.BUILDS,
        Domain.CORE,
        Domain.WORK,
    ]
