"""Transition rules and the ordered rule table."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from stateful.states import States, allows, is_wildcard, to_states

TransitionArguments = Any
Transition = Callable[[TransitionArguments], Any]


@dataclass(frozen=True)
class TransitionRule:
    """A transition that may run from ``source_states`` into ``destination_states``.

    Both state sets accept any iterable (or a single state) and are frozen into
    tuples on construction.
    """

    source_states: Iterable[Any]
    transition: Transition
    destination_states: Iterable[Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "source_states", to_states(self.source_states))
        object.__setattr__(self, "destination_states", to_states(self.destination_states))

    def is_allowed_to_run(self, state: Any) -> bool:
        return allows(self.source_states, state)

    def is_allowed_to_transfer(self, state: Any) -> bool:
        return allows(self.destination_states, state)

    def matches(self, transition: Transition) -> bool:
        return self.transition is transition or self.transition == transition


@dataclass
class TransitionRules:
    """Append-only, ordered collection of transition rules."""

    rules: list[TransitionRule] = field(default_factory=list)

    def __iter__(self) -> Iterator[TransitionRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __getitem__(self, index: int) -> TransitionRule:
        return self.rules[index]

    def add(self, rule: TransitionRule) -> None:
        self.rules.append(rule)

    def extend(self, rules: Iterable[TransitionRule]) -> None:
        for rule in rules:
            self.add(rule)

    def find(self, transition: Transition) -> TransitionRule | None:
        """Return the first rule registered for ``transition``, or None."""
        for rule in self.rules:
            if rule.matches(transition):
                return rule
        return None

    def all_states(self) -> list[Any]:
        """All concrete states referenced by any rule, in first-seen order."""
        seen: set[Any] = set()
        states: list[Any] = []
        for rule in self.rules:
            for state in (*rule.source_states, *rule.destination_states):
                if is_wildcard(state) or state in seen:
                    continue
                seen.add(state)
                states.append(state)
        return states
