"""Execution mode selection and the mode state machine."""

from __future__ import annotations

from quantumn.router.types import AgentMode, Complexity, Intent

_FIXED_MODES = {
    Intent.WRITE: AgentMode.BUILD,
    Intent.EDIT: AgentMode.BUILD,
    Intent.DELETE: AgentMode.BUILD,
    Intent.BASH: AgentMode.BUILD,
    Intent.GIT: AgentMode.BUILD,
    Intent.GREP: AgentMode.REVIEW,
    Intent.GLOB: AgentMode.REVIEW,
    Intent.FIND: AgentMode.REVIEW,
    Intent.REVIEW: AgentMode.REVIEW,
    Intent.DEBUG: AgentMode.DEBUG,
    Intent.PLAN: AgentMode.PLAN,
    Intent.DESIGN: AgentMode.PLAN,
    Intent.UNKNOWN: AgentMode.CHAT,
}

_CONVERSATIONAL = frozenset({Intent.READ, Intent.EXPLAIN, Intent.CHAT, Intent.HELP})


def pick_mode(intent: Intent, complexity: Complexity) -> AgentMode:
    """Choose the execution mode for an intent and complexity."""
    if intent in _CONVERSATIONAL:
        return AgentMode.REVIEW if complexity >= Complexity.COMPLEX else AgentMode.CHAT
    return _FIXED_MODES[intent]


def can_transition(current: AgentMode, target: AgentMode) -> bool:
    """Whether moving from ``current`` to ``target`` is allowed."""
    return current.can_transition_to(target)


def transition(current: AgentMode, target: AgentMode) -> AgentMode | None:
    """The target mode if the transition is allowed, otherwise ``None``."""
    return target if can_transition(current, target) else None


def get_mode_instruction(mode: AgentMode) -> str:
    """System-prompt instruction for a mode."""
    return mode.instruction()


def get_mode_display(mode: AgentMode) -> str:
    """Display name of a mode."""
    return mode.value