"""State values, the wildcard state and state-set matching."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any, Final

State = Hashable
States = tuple[Any, ...]


class WildCardState:
    """Reserved state matching any concrete state inside a rule.

    There is exactly one instance, ``WILDCARD``. It compares equal only to
    itself, so it can never be mistaken for a value from an entity's domain.
    """

    _instance: WildCardState | None = None

    def __new__(cls) -> WildCardState:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "WILDCARD"

    def __reduce__(self) -> str:
        return "WILDCARD"


WILDCARD: Final = WildCardState()


def is_wildcard(state: Any) -> bool:
    return state is WILDCARD


def to_states(states: Iterable[Any] | Any | None) -> States:
    """Freeze a caller supplied state collection into a tuple, keeping order.

    A lone state (a string, an int, an enum member, the wildcard) becomes a
    one-element tuple.
    """
    if states is None:
        return ()
    if isinstance(states, (str, bytes)) or not isinstance(states, Iterable):
        return (states,)
    return tuple(states)


def allows(states: Iterable[Any], candidate: Any) -> bool:
    """Return True when ``states`` contains ``candidate`` or the wildcard."""
    for state in states:
        if is_wildcard(state) or state == candidate:
            return True
    return False
