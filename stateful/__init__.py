"""Finite state machine engine for objects that expose a current state."""

from stateful.core.exceptions import (
    CannotRunFromStateError,
    CannotTransferToStateError,
    StateMachineError,
    StatefulException,
    TransitionRuleNotFoundError,
)
from stateful.entity import AttributeStateful, Stateful
from stateful.machine import StateMachine
from stateful.states import WILDCARD, State, States, allows, is_wildcard
from stateful.transitions import Transition, TransitionArguments, TransitionRule, TransitionRules

__all__ = [
    "AttributeStateful",
    "CannotRunFromStateError",
    "CannotTransferToStateError",
    "State",
    "StateMachine",
    "StateMachineError",
    "Stateful",
    "StatefulException",
    "States",
    "Transition",
    "TransitionArguments",
    "TransitionRule",
    "TransitionRuleNotFoundError",
    "TransitionRules",
    "WILDCARD",
    "allows",
    "is_wildcard",
]
