"""State machine engine driving one stateful entity through declared transitions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from stateful.core.exceptions import (
    CannotRunFromStateError,
    CannotTransferToStateError,
    TransitionRuleNotFoundError,
)
from stateful.core.logging import build_transition_context, build_transition_event
from stateful.entity import Stateful
from stateful.states import is_wildcard
from stateful.transitions import Transition, TransitionArguments, TransitionRule, TransitionRules

logger = logging.getLogger(__name__)


class StateMachine:
    """Validates and executes transitions on behalf of ``stateful_object``.

    The machine never owns the state: it reads it through ``state()`` and
    commits it through ``set_state()``. Runs are not synchronized; callers
    sharing an entity across threads must serialize ``run`` themselves.
    """

    def __init__(self, stateful_object: Stateful, transition_rules: TransitionRules | None = None) -> None:
        self.stateful_object = stateful_object
        self._transition_rules = transition_rules if transition_rules is not None else TransitionRules()

    def add_transition(
        self,
        transition: Transition,
        source_states: Iterable[Any],
        destination_states: Iterable[Any],
    ) -> TransitionRule:
        rule = TransitionRule(
            source_states=source_states,
            transition=transition,
            destination_states=destination_states,
        )
        self._transition_rules.add(rule)
        context = build_transition_context(self.stateful_object, transition)
        logger.debug(
            "state_machine.rule.added",
            extra=build_transition_event(
                "state_machine.rule.added",
                context,
                to_state=list(rule.destination_states),
            ),
        )
        return rule

    def get_transition_rules(self) -> TransitionRules:
        return self._transition_rules

    def get_all_states(self) -> list[Any]:
        """All known concrete states, wildcard excluded."""
        return self._transition_rules.all_states()

    def get_terminal_states(self) -> list[Any]:
        """Known states from which no registered rule can run."""
        return [
            state
            for state in self.get_all_states()
            if not any(rule.is_allowed_to_run(state) for rule in self._transition_rules)
        ]

    def can_run(self, transition: Transition) -> bool:
        rule = self._transition_rules.find(transition)
        return rule is not None and rule.is_allowed_to_run(self.stateful_object.state())

    def run(self, transition: Transition, transition_arguments: TransitionArguments = None) -> None:
        """Run ``transition`` and commit the state it returns.

        Raises TransitionRuleNotFoundError, CannotRunFromStateError or
        CannotTransferToStateError on validation failures. Exceptions raised by
        the transition or by ``set_state`` propagate unchanged. The entity's
        state is only written once every check has passed.
        """
        transition_rule = self._transition_rules.find(transition)
        if transition_rule is None:
            context = build_transition_context(self.stateful_object, transition)
            logger.info(
                "state_machine.run.rule_not_found",
                extra=build_transition_event("state_machine.run.rule_not_found", context),
            )
            raise TransitionRuleNotFoundError(transition)

        current_state = self.stateful_object.state()
        context = build_transition_context(self.stateful_object, transition, current_state)
        if not transition_rule.is_allowed_to_run(current_state):
            logger.info(
                "state_machine.run.rejected_source",
                extra=build_transition_event("state_machine.run.rejected_source", context),
            )
            raise CannotRunFromStateError(self, transition_rule, current_state)

        try:
            new_state = transition(transition_arguments)
        except Exception as exc:
            logger.debug(
                "state_machine.run.transition_failed",
                extra=build_transition_event("state_machine.run.transition_failed", context, error=repr(exc)),
            )
            raise

        if is_wildcard(new_state) or not transition_rule.is_allowed_to_transfer(new_state):
            logger.info(
                "state_machine.run.rejected_destination",
                extra=build_transition_event("state_machine.run.rejected_destination", context, to_state=new_state),
            )
            raise CannotTransferToStateError(new_state, transition_rule)

        self.stateful_object.set_state(new_state)
        logger.debug(
            "state_machine.run.succeeded",
            extra=build_transition_event("state_machine.run.succeeded", context, to_state=new_state),
        )

    def get_available_transitions(self) -> list[Transition]:
        """Transitions that may run from the current state, in registration order."""
        current_state = self.stateful_object.state()
        return [rule.transition for rule in self._transition_rules if rule.is_allowed_to_run(current_state)]

    def __repr__(self) -> str:
        return f"StateMachine({self.stateful_object!r}, rules={len(self._transition_rules)})"
