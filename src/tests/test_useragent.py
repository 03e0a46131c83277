from __future__ import annotations

from mcp.types import Implementation

from adomcp.useragent import PRODUCT_NAME, UserAgentComposer


def test_current__before_handshake() -> None:
    composer = UserAgentComposer("1.2.3")

    agent = composer.current()
    assert agent == f"{PRODUCT_NAME}/1.2.3"
    assert "(" not in agent
    assert not composer.has_client_info


def test_append_client_info__adds_peer_identity() -> None:
    composer = UserAgentComposer("1.2.3")
    composer.append_client_info(Implementation(name="agent-x", version="0.1"))

    agent = composer.current()
    assert "1.2.3" in agent
    assert "agent-x" in agent and "0.1" in agent
    assert agent == f"{PRODUCT_NAME}/1.2.3 (agent-x/0.1)"
    assert composer.user_agent == agent


def test_append_client_info__overwrites_rather_than_appends() -> None:
    composer = UserAgentComposer("1.2.3")
    composer.append_client_info(Implementation(name="agent-x", version="0.1"))
    composer.append_client_info(Implementation(name="agent-y", version="2.0"))

    assert composer.current() == f"{PRODUCT_NAME}/1.2.3 (agent-y/2.0)"
    assert "agent-x" not in composer.current()


def test_append_client_info__ignores_missing_info() -> None:
    composer = UserAgentComposer("1.2.3")
    composer.append_client_info(None)
    composer.append_client_info(Implementation(name="agent-x", version=""))

    assert composer.current() == f"{PRODUCT_NAME}/1.2.3"

    composer.append_client_info(Implementation(name="agent-x", version="0.1"))
    composer.append_client_info(None)
    assert composer.current().endswith("(agent-x/0.1)")
