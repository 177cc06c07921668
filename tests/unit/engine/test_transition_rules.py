from __future__ import annotations

import dataclasses
import enum

import pytest

from stateful import WILDCARD, TransitionRule, TransitionRules, allows, is_wildcard


def start(arguments):
    return "running"


def stop(arguments):
    return "stopped"


def pause(arguments):
    return "paused"


def test_find_returns_first_matching_rule():
    rules = TransitionRules()
    first = TransitionRule(["idle"], start, ["running"])
    second = TransitionRule(["running"], stop, ["stopped"])
    third = TransitionRule(["paused"], start, ["running"])
    for rule in (first, second, third):
        rules.add(rule)

    assert rules.find(start) is first
    assert rules.find(stop) is second
    assert rules.find(pause) is None


def test_find_on_empty_table():
    assert TransitionRules().find(start) is None


def test_all_states_deduplicates_in_first_seen_order():
    rules = TransitionRules()
    rules.add(TransitionRule(["idle", "paused", "idle"], start, ["running"]))
    rules.add(TransitionRule(["running"], pause, ["paused"]))
    rules.add(TransitionRule(["running", "paused"], stop, ["stopped"]))

    assert rules.all_states() == ["idle", "paused", "running", "stopped"]


def test_all_states_excludes_wildcard():
    rules = TransitionRules()
    rules.add(TransitionRule([WILDCARD], stop, ["A", "B"]))

    assert rules.all_states() == ["A", "B"]


def test_rule_is_immutable_and_freezes_state_sets():
    sources = ["idle"]
    rule = TransitionRule(sources, start, ["running"])
    sources.append("paused")

    assert rule.source_states == ("idle",)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.source_states = ("paused",)


def test_single_string_state_is_not_split():
    rule = TransitionRule("idle", start, "running")

    assert rule.source_states == ("idle",)
    assert rule.is_allowed_to_run("idle")
    assert not rule.is_allowed_to_run("i")


def test_rule_checks_share_wildcard_semantics():
    rule = TransitionRule([WILDCARD], start, [WILDCARD])

    assert rule.is_allowed_to_run("anything")
    assert rule.is_allowed_to_transfer("anything")


def test_allows_membership_and_wildcard():
    assert allows(["a", "b"], "b")
    assert not allows(["a", "b"], "c")
    assert not allows([], "a")
    assert allows(["a", WILDCARD], "z")


def test_wildcard_is_a_singleton_distinct_from_strings():
    assert is_wildcard(WILDCARD)
    assert not is_wildcard("*")
    assert WILDCARD != "*"
    assert type(WILDCARD)() is WILDCARD


def test_extend_appends_rules_in_order():
    rules = TransitionRules()
    rules.add(TransitionRule(["idle"], start, ["running"]))
    late_start = TransitionRule(["paused"], start, ["running"])
    stop_rule = TransitionRule(["running"], stop, ["stopped"])

    rules.extend([stop_rule, late_start])

    assert [rule.transition for rule in rules] == [start, stop, start]
    assert rules.find(stop) is stop_rule
    assert rules.find(start) is not late_start


def test_single_non_string_states_are_wrapped():
    class Level(enum.Enum):
        LOW = 1
        HIGH = 2

    numeric = TransitionRule(1, start, 2)
    enumerated = TransitionRule(Level.LOW, start, Level.HIGH)
    wildcard = TransitionRule(WILDCARD, start, None)

    assert numeric.source_states == (1,)
    assert numeric.is_allowed_to_transfer(2)
    assert enumerated.source_states == (Level.LOW,)
    assert enumerated.destination_states == (Level.HIGH,)
    assert wildcard.source_states == (WILDCARD,)
    assert wildcard.destination_states == ()


def test_enum_class_expands_to_its_members():
    class Level(enum.Enum):
        LOW = 1
        HIGH = 2

    rule = TransitionRule(Level, start, [Level.HIGH])

    assert rule.source_states == (Level.LOW, Level.HIGH)
