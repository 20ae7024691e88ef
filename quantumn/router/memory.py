"""Memory loading policy selection."""

from __future__ import annotations

from quantumn.router.types import AgentMode, Complexity, Intent, MemoryPolicy

_HINTS = {
    MemoryPolicy.NONE: "No memory loading needed",
    MemoryPolicy.RECENT: "Load recently modified files",
    MemoryPolicy.RELEVANT: "Load files relevant to current task",
    MemoryPolicy.FULL: "Load all recent project context",
}


def pick_memory_policy(
    intent: Intent, complexity: Complexity, mode: AgentMode
) -> MemoryPolicy:
    """Choose how much memory to load for a task."""
    if complexity is Complexity.TRIVIAL:
        return MemoryPolicy.NONE
    if mode is AgentMode.CHAT and complexity <= Complexity.SIMPLE:
        return MemoryPolicy.NONE
    if mode is AgentMode.PLAN:
        return MemoryPolicy.RECENT
    if mode in (AgentMode.REVIEW, AgentMode.DEBUG):
        return MemoryPolicy.RELEVANT
    if mode is AgentMode.BUILD and complexity >= Complexity.COMPLEX:
        return MemoryPolicy.FULL
    return MemoryPolicy.RECENT


def get_memory_hint(policy: MemoryPolicy) -> str:
    """Human-readable loading hint for a policy."""
    return _HINTS[policy]