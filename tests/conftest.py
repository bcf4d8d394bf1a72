"""
Root Pytest Fixtures.

Shared fixtures available to all test types: builders for dashboard
collection payloads as the API returns them.
"""

import json
from collections.abc import Callable
from typing import Any

import pytest


# =============================================================================
# Dashboard Payload Builders
# =============================================================================


def build_envelope(*items: dict[str, Any]) -> dict[str, Any]:
    """
    Build a collection envelope where each item is a {name: value} mapping.

    Field order within an item follows the mapping's order.
    """
    return {
        "collection": {
            "version": "1.0",
            "href": "http://localhost:1664/api/v1/dashboard",
            "items": [
                {
                    "href": "http://localhost:1664/api/v1/dashboard",
                    "data": [{"name": name, "value": value} for name, value in item.items()],
                }
                for item in items
            ],
            "template": {},
            "error": {},
        }
    }


def build_action(
    action_id: float = 6010,
    name: str = "Find suspicious files",
    target: str = "os='linux'",
    investigators: list[str] | None = None,
    last_update_time: str = "2014-03-03T15:04:05Z",
) -> dict[str, Any]:
    """Build an action payload as the API serializes it."""
    names = investigators if investigators is not None else ["Julien Vehent"]
    return {
        "id": action_id,
        "name": name,
        "target": target,
        "description": {"author": "Julien Vehent", "revision": 1},
        "threat": {"level": "info", "family": "test"},
        "investigators": [{"id": i + 1, "name": n, "pgpfingerprint": "ABCD"} for i, n in enumerate(names)],
        "starttime": "2014-03-03T15:00:00Z",
        "lastupdatetime": last_update_time,
        "status": "completed",
        "syntaxversion": 2,
    }


@pytest.fixture
def envelope() -> Callable[..., dict[str, Any]]:
    """Provide the envelope builder."""
    return build_envelope


@pytest.fixture
def action_payload() -> Callable[..., dict[str, Any]]:
    """Provide the action payload builder."""
    return build_action


@pytest.fixture
def dashboard_body() -> Callable[..., bytes]:
    """Serialize items into a dashboard response body."""

    def _body(*items: dict[str, Any]) -> bytes:
        return json.dumps(build_envelope(*items)).encode()

    return _body


@pytest.fixture
def sample_dashboard(dashboard_body) -> bytes:
    """The reference dashboard: counts, versions, and no actions."""
    return dashboard_body(
        {"active agents": 12},
        {"agents started in the last 24 hours": 3},
        {"agents versions count": [{"version": "2.1", "count": 10}, {"version": "2.2", "count": 2}]},
    )
