import pytest

from quantumn.router.mode import (
    can_transition,
    get_mode_display,
    get_mode_instruction,
    pick_mode,
    transition,
)
from quantumn.router.types import AgentMode, Complexity, Intent


@pytest.mark.parametrize(
    "intent, complexity, expected",
    [
        (Intent.READ, Complexity.SIMPLE, AgentMode.CHAT),
        (Intent.EXPLAIN, Complexity.SIMPLE, AgentMode.CHAT),
        (Intent.CHAT, Complexity.SIMPLE, AgentMode.CHAT),
        (Intent.HELP, Complexity.SIMPLE, AgentMode.CHAT),
        (Intent.READ, Complexity.COMPLEX, AgentMode.REVIEW),
        (Intent.EXPLAIN, Complexity.COMPLEX, AgentMode.REVIEW),
        (Intent.CHAT, Complexity.HEAVY, AgentMode.REVIEW),
        (Intent.HELP, Complexity.MODERATE, AgentMode.CHAT),
        (Intent.WRITE, Complexity.SIMPLE, AgentMode.BUILD),
        (Intent.EDIT, Complexity.SIMPLE, AgentMode.BUILD),
        (Intent.DELETE, Complexity.SIMPLE, AgentMode.BUILD),
        (Intent.BASH, Complexity.SIMPLE, AgentMode.BUILD),
        (Intent.GIT, Complexity.SIMPLE, AgentMode.BUILD),
        (Intent.GREP, Complexity.SIMPLE, AgentMode.REVIEW),
        (Intent.GLOB, Complexity.SIMPLE, AgentMode.REVIEW),
        (Intent.FIND, Complexity.SIMPLE, AgentMode.REVIEW),
        (Intent.REVIEW, Complexity.SIMPLE, AgentMode.REVIEW),
        (Intent.DEBUG, Complexity.SIMPLE, AgentMode.DEBUG),
        (Intent.PLAN, Complexity.SIMPLE, AgentMode.PLAN),
        (Intent.DESIGN, Complexity.SIMPLE, AgentMode.PLAN),
        (Intent.UNKNOWN, Complexity.SIMPLE, AgentMode.CHAT),
    ],
)
def test_pick_mode(intent, complexity, expected):
    assert pick_mode(intent, complexity) is expected


def test_every_intent_has_a_mode():
    modes = {pick_mode(intent, Complexity.SIMPLE) for intent in Intent}
    assert modes == set(AgentMode)


@pytest.mark.parametrize(
    "current, target",
    [
        (AgentMode.CHAT, AgentMode.PLAN),
        (AgentMode.CHAT, AgentMode.BUILD),
        (AgentMode.PLAN, AgentMode.BUILD),
        (AgentMode.BUILD, AgentMode.PLAN),
        (AgentMode.BUILD, AgentMode.DEBUG),
        (AgentMode.CHAT, AgentMode.REVIEW),
        (AgentMode.CHAT, AgentMode.DEBUG),
        (AgentMode.REVIEW, AgentMode.REVIEW),
    ],
)
def test_valid_transitions(current, target):
    assert can_transition(current, target) is True


@pytest.mark.parametrize(
    "current, target",
    [
        (AgentMode.PLAN, AgentMode.DEBUG),
        (AgentMode.REVIEW, AgentMode.BUILD),
        (AgentMode.DEBUG, AgentMode.CHAT),
        (AgentMode.PLAN, AgentMode.CHAT),
    ],
)
def test_invalid_transitions(current, target):
    assert can_transition(current, target) is False


def test_same_mode_transition_always_allowed():
    assert all(can_transition(mode, mode) for mode in AgentMode)


def test_transition_function():
    assert transition(AgentMode.CHAT, AgentMode.PLAN) is AgentMode.PLAN
    assert transition(AgentMode.PLAN, AgentMode.DEBUG) is None


def test_mode_instructions():
    assert get_mode_instruction(AgentMode.CHAT) == (
        "Answer directly. Suggest tools only if needed."
    )
    assert get_mode_instruction(AgentMode.PLAN) == (
        "Analyze and plan. Do NOT execute. Read-only."
    )
    assert get_mode_instruction(AgentMode.BUILD) == (
        "Implement changes. Verify. Report progress."
    )
    assert get_mode_instruction(AgentMode.REVIEW) == (
        "Review code. Report issues and suggestions."
    )
    assert get_mode_instruction(AgentMode.DEBUG) == (
        "Investigate. Find root cause. Suggest fix."
    )


@pytest.mark.parametrize(
    "mode, expected",
    [
        (AgentMode.CHAT, "chat"),
        (AgentMode.PLAN, "plan"),
        (AgentMode.BUILD, "build"),
        (AgentMode.REVIEW, "review"),
        (AgentMode.DEBUG, "debug"),
    ],
)
def test_mode_display(mode, expected):
    assert get_mode_display(mode) == expected