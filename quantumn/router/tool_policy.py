"""Per-mode and per-intent tool permissions."""

from __future__ import annotations

from collections.abc import Iterable

from quantumn.router.types import AgentMode, Intent, ToolPolicy

_CONFIRMED_BUILD_INTENTS = frozenset(
    {Intent.DELETE, Intent.BASH, Intent.WRITE, Intent.GIT}
)


def _build_mode_tools(intent: Intent) -> ToolPolicy:
    policy = ToolPolicy.default_policy()
    if intent in _CONFIRMED_BUILD_INTENTS:
        return policy.with_confirmation()
    return policy


def _debug_mode_tools() -> ToolPolicy:
    return ToolPolicy(
        allowed_tools=["Read", "Grep", "Glob", "Bash"],
        disallowed_tools=["Write"],
        require_confirmation=True,
    )


def _plan_mode_tools() -> ToolPolicy:
    return ToolPolicy(
        allowed_tools=["Read", "Grep", "Glob"],
        disallowed_tools=["Write", "Bash"],
    )


def _chat_mode_tools() -> ToolPolicy:
    return ToolPolicy(
        allowed_tools=["Read"],
        disallowed_tools=["Write", "Bash", "Grep", "Glob"],
    )


def pick_tools(intent: Intent, mode: AgentMode) -> ToolPolicy:
    """Tool policy for an intent in a given mode."""
    if mode is AgentMode.BUILD:
        return _build_mode_tools(intent)
    if mode is AgentMode.REVIEW:
        return ToolPolicy.read_only()
    if mode is AgentMode.DEBUG:
        return _debug_mode_tools()
    if mode is AgentMode.PLAN:
        return _plan_mode_tools()
    return _chat_mode_tools()


def filter_tools_by_policy(tool_names: Iterable[str], policy: ToolPolicy) -> list[str]:
    """The tool names the policy allows, in their original order."""
    return [name for name in tool_names if policy.is_tool_allowed(name)]