"""
Dashboard Collection Decoder.

Turns the raw dashboard response into typed aggregates.

Each data field is dispatched on its name. Unknown names are skipped.
Recognized names decode into one variant per field, and the variants are
then folded into AgentStats and the ordered action list:

    action                                → ActionField (accumulated)
    active agents                         → ActiveAgentsField (last wins)
    agents versions count                 → VersionCountsField (accumulated)
    agents started in the last 24 hours   → RestartedAgentsField (last wins)

A recognized name whose payload does not validate is fatal (MalformedField).
A null version list counts as empty, and action members the API omits
take zero values.
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import StrictFloat, TypeAdapter, ValidationError

from modules.core.exceptions import MalformedEnvelope, MalformedField
from modules.core.logging import get_logger, log_with_source
from modules.schemas.dashboard import Action, AgentsSum, DataField, Envelope

logger = get_logger(__name__)


class FieldName(str, Enum):
    """Data field names the console understands."""

    ACTION = "action"
    ACTIVE_AGENTS = "active agents"
    AGENTS_VERSIONS_COUNT = "agents versions count"
    AGENTS_RESTARTED = "agents started in the last 24 hours"


@dataclass(frozen=True)
class ActionField:
    action: Action


@dataclass(frozen=True)
class ActiveAgentsField:
    count: float


@dataclass(frozen=True)
class VersionCountsField:
    sums: list[AgentsSum] | None


@dataclass(frozen=True)
class RestartedAgentsField:
    count: float


DecodedField = ActionField | ActiveAgentsField | VersionCountsField | RestartedAgentsField


@dataclass
class AgentStats:
    """Aggregate agent population figures. Positional counts may be absent."""

    active: float | None = None
    restarted: float | None = None
    versions: list[AgentsSum] = field(default_factory=list)


_PAYLOADS: dict[FieldName, tuple[TypeAdapter, Callable[[Any], DecodedField]]] = {
    FieldName.ACTION: (TypeAdapter(Action), ActionField),
    FieldName.ACTIVE_AGENTS: (TypeAdapter(StrictFloat), ActiveAgentsField),
    FieldName.AGENTS_VERSIONS_COUNT: (TypeAdapter(list[AgentsSum] | None), VersionCountsField),
    FieldName.AGENTS_RESTARTED: (TypeAdapter(StrictFloat), RestartedAgentsField),
}


def parse_envelope(raw: bytes | str) -> Envelope:
    """
    Parse the outer collection envelope.

    Raises:
        MalformedEnvelope: If raw is not JSON of the collection shape.
    """
    try:
        return Envelope.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedEnvelope(f"Malformed collection envelope: {e}") from e


def decode_field(data: DataField) -> DecodedField | None:
    """
    Decode one data field into its variant, or None if the name is unknown.

    Raises:
        MalformedField: If the name is recognized but the payload is not.
    """
    try:
        name = FieldName(data.name)
    except ValueError:
        log_with_source(logger, "console", "debug", "Skipping unknown field", field=data.name)
        return None

    adapter, variant = _PAYLOADS[name]
    try:
        payload = adapter.validate_python(data.value)
    except ValidationError as e:
        raise MalformedField(name.value, f"Malformed value for field '{name.value}': {e}") from e
    return variant(payload)


def decode_fields(envelope: Envelope) -> Iterator[DecodedField]:
    """Yield decoded variants in item order, then field order."""
    for item in envelope.collection.items:
        for data in item.data:
            decoded = decode_field(data)
            if decoded is not None:
                yield decoded


def fold_fields(fields: Iterable[DecodedField]) -> tuple[AgentStats, list[Action]]:
    """Fold decoded variants into agent stats and the ordered action list."""
    stats = AgentStats()
    actions: list[Action] = []

    for decoded in fields:
        if isinstance(decoded, ActionField):
            actions.append(decoded.action)
        elif isinstance(decoded, ActiveAgentsField):
            stats.active = decoded.count
        elif isinstance(decoded, VersionCountsField):
            stats.versions.extend(decoded.sums or [])
        elif isinstance(decoded, RestartedAgentsField):
            stats.restarted = decoded.count

    return stats, actions


def decode(raw: bytes | str) -> tuple[AgentStats, list[Action]]:
    """
    Decode a dashboard response body.

    Args:
        raw: Response body of GET {base_url}dashboard.

    Returns:
        Tuple of (AgentStats, actions in encounter order).

    Raises:
        MalformedEnvelope: If the outer envelope cannot be parsed.
        MalformedField: If a recognized field has a payload of the wrong shape.
    """
    envelope = parse_envelope(raw)
    stats, actions = fold_fields(decode_fields(envelope))

    log_with_source(
        logger,
        "console",
        "debug",
        "Dashboard decoded",
        items=len(envelope.collection.items),
        actions=len(actions),
        versions=len(stats.versions),
    )
    return stats, actions
