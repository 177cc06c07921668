"""Structured logging helpers for state machine events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stateful.core.exceptions import describe_transition

TRANSITION_FIELDS = ("entity", "transition", "from_state", "to_state", "error")


@dataclass(frozen=True)
class TransitionLogContext:
    """Normalized context fields attached to every transition log line."""

    entity: str
    transition: str
    from_state: Any = None


def build_transition_context(entity: Any, transition: Any, from_state: Any = None) -> TransitionLogContext:
    return TransitionLogContext(
        entity=type(entity).__name__,
        transition=describe_transition(transition),
        from_state=from_state,
    )


def build_transition_event(event: str, context: TransitionLogContext, **fields: Any) -> dict[str, Any]:
    """Build the ``extra`` payload for a transition log record."""
    payload: dict[str, Any] = {
        "event": event,
        "entity": context.entity,
        "transition": context.transition,
        "from_state": context.from_state,
    }
    payload.update(fields)
    return payload
