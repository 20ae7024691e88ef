"""Token budget allocation for conversation context."""

from __future__ import annotations

from quantumn.router.types import AgentMode, Complexity, ContextBudget


def pick_budget(complexity: Complexity, mode: AgentMode) -> ContextBudget:
    """Choose the context budget from complexity and mode."""
    base = ContextBudget.from_complexity(complexity)
    if mode is AgentMode.CHAT:
        return ContextBudget.MINIMAL
    if mode in (AgentMode.PLAN, AgentMode.REVIEW, AgentMode.DEBUG):
        return max(ContextBudget.RELEVANT, base)
    return base


def agent_token_budget(budget: ContextBudget, system_prompt_tokens: int) -> int:
    """Tokens left for the agent after the system prompt, never below zero."""
    return max(0, budget.tokens() - system_prompt_tokens)


def estimate_prompt_tokens(prompt: str) -> int:
    """Rough token estimate at about four bytes of UTF-8 per token."""
    return len(prompt.encode("utf-8")) // 4