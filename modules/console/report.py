"""
Dashboard Report Formatting.

Builds the two report blocks (agent summary, latest actions) from decoded
dashboard values and renders them as bordered lines:

    +------
    | Agents Summary:
    | * 12 agents have checked in during the last 5 minutes
    | * 3 agents (re)started in the last 24 hours
    | * 10 agents run version 2.1
    |
    | Latest Actions:
    | * None
    +------

Formatting is pure. Printing is left to the session.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from rich.text import Text

from modules.console.decoder import AgentStats
from modules.schemas.dashboard import Action

AGENTS_HEADER = "Agents Summary:"
ACTIONS_HEADER = "Latest Actions:"
NO_ACTIONS = "* None"

BORDER = "|"
FENCE = "+------"
BORDER_STYLE = "bold red"

MAX_DISPLAY_LENGTH = 30
TRUNCATED_LENGTH = 27

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def truncate(value: str) -> str:
    """Shorten value to 27 characters plus an ellipsis if it exceeds 30."""
    if len(value) > MAX_DISPLAY_LENGTH:
        return value[:TRUNCATED_LENGTH] + "..."
    return value


def format_count(value: float) -> str:
    """Render a numeric value without decimals (42.0 -> '42')."""
    return f"{value:.0f}"


def _zone_abbreviation(ts: datetime) -> str:
    offset = ts.utcoffset()
    if offset is None or offset == timedelta(0):
        return "UTC"
    name = ts.tzname()
    if name and name[0].isalpha() and not name.startswith("UTC"):
        return name
    return ts.strftime("%z")


def format_timestamp(ts: datetime) -> str:
    """Render ts as 'On Mon Jan 2 at 3:04pm (UTC)'."""
    hour = ts.hour % 12 or 12
    meridiem = "am" if ts.hour < 12 else "pm"
    return (
        f"On {_WEEKDAYS[ts.weekday()]} {_MONTHS[ts.month - 1]} {ts.day} "
        f"at {hour}:{ts.minute:02d}{meridiem} ({_zone_abbreviation(ts)})"
    )


def format_investigators(action: Action) -> str:
    return truncate("; ".join(i.name for i in action.investigators))


def format_action(action: Action) -> str:
    return (
        f"* {format_timestamp(action.last_update_time)}, "
        f"{format_investigators(action)} launched '{truncate(action.name)}' "
        f"with id {format_count(action.id)} on target '{action.target}'"
    )


def agent_summary_lines(stats: AgentStats) -> list[str]:
    """Header, active slot, restart slot, then one line per version count."""
    lines = [AGENTS_HEADER, "", ""]
    if stats.active is not None:
        lines[1] = f"* {format_count(stats.active)} agents have checked in during the last 5 minutes"
    if stats.restarted is not None:
        lines[2] = f"* {format_count(stats.restarted)} agents (re)started in the last 24 hours"
    for asum in stats.versions:
        lines.append(f"* {format_count(asum.count)} agents run version {asum.version}")
    return lines


def action_lines(actions: list[Action]) -> list[str]:
    """
    Header plus one line per action.

    Fewer than two actions always render as the single '* None' line,
    including the case of exactly one action.
    """
    if len(actions) < 2:
        return [ACTIONS_HEADER, NO_ACTIONS]
    return [ACTIONS_HEADER] + [format_action(a) for a in actions]


@dataclass
class Report:
    """Formatted report blocks, ready to render."""

    agents: list[str] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)

    def lines(self) -> list[str]:
        """All display lines, agent block first."""
        return self.agents + self.actions

    def render(self) -> list[Text]:
        """Bordered lines: fence, agent block, bare border, action block, fence."""
        fence = Text(FENCE, style=BORDER_STYLE)
        rendered = [fence]
        rendered.extend(_bordered(line) for line in self.agents)
        rendered.append(Text(BORDER, style=BORDER_STYLE))
        rendered.extend(_bordered(line) for line in self.actions)
        rendered.append(fence.copy())
        return rendered


def _bordered(line: str) -> Text:
    return Text.assemble((BORDER, BORDER_STYLE), " ", line)


def format_report(stats: AgentStats, actions: list[Action]) -> Report:
    """Build the report for decoded dashboard values."""
    return Report(agents=agent_summary_lines(stats), actions=action_lines(actions))
