"""Custom exceptions for the stateful package."""

from __future__ import annotations

from typing import Any


class StatefulException(Exception):
    """Base exception for the stateful package."""

    pass


class ConfigurationError(StatefulException):
    """Raised when configuration is invalid."""

    pass


class StateMachineError(StatefulException):
    """Base class for errors raised by the state machine itself."""

    pass


def describe_transition(transition: Any) -> str:
    """Human readable name of a transition handle."""
    name = getattr(transition, "__qualname__", None) or getattr(transition, "__name__", None)
    return name or repr(transition)


class TransitionRuleNotFoundError(StateMachineError):
    """Raised when no rule is registered for the requested transition."""

    def __init__(self, transition: Any) -> None:
        self.transition = transition
        super().__init__(f"No transition rule found for transition {describe_transition(transition)}")


class CannotRunFromStateError(StateMachineError):
    """Raised when the current state is not an allowed source of the rule."""

    def __init__(self, machine: Any, rule: Any, current_state: Any) -> None:
        self.machine = machine
        self.rule = rule
        self.current_state = current_state
        allowed = ", ".join(repr(state) for state in rule.source_states)
        super().__init__(
            f"Cannot run {describe_transition(rule.transition)} from state {current_state!r}; "
            f"allowed source states: [{allowed}]"
        )


class CannotTransferToStateError(StateMachineError):
    """Raised when a transition produced a state outside the rule's destinations."""

    def __init__(self, state: Any, rule: Any = None) -> None:
        self.state = state
        self.rule = rule
        super().__init__(f"Cannot transfer to state {state!r}")
