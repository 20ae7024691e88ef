"""The routing pipeline: from a prompt to a complete routing decision."""

from __future__ import annotations

from quantumn.router.analyzer import classify_intent, score_complexity
from quantumn.router.context import pick_budget
from quantumn.router.memory import pick_memory_policy
from quantumn.router.mode import pick_mode
from quantumn.router.model import pick_model_tier
from quantumn.router.tool_policy import pick_tools
from quantumn.router.types import Complexity, Intent, RouterConfig, RoutingDecision


def _calculate_confidence(intent: Intent, complexity: Complexity) -> float:
    confidence = 0.7
    if intent is not Intent.UNKNOWN:
        confidence += 0.15
    if complexity is not Complexity.MODERATE:
        confidence += 0.1
    return min(confidence, 1.0)


def route(prompt: str, cwd: str, config: RouterConfig) -> RoutingDecision:
    """Route a prompt through all seven layers; pure and free of side effects."""
    intent = classify_intent(prompt)
    complexity = score_complexity(prompt)
    mode = pick_mode(intent, complexity)
    model_tier = pick_model_tier(complexity, intent, mode, config)
    tools = pick_tools(intent, mode)
    context_budget = pick_budget(complexity, mode)
    memory_policy = pick_memory_policy(intent, complexity, mode)
    confidence = _calculate_confidence(intent, complexity)

    reasoning = (
        f"intent={intent.value}, complexity={complexity.label}, mode={mode.value}, "
        f"model={model_tier.value}, tools={len(tools.allowed_tools)}, "
        f"budget={context_budget.tokens()}, memory={memory_policy.value}"
    )

    return RoutingDecision(
        intent=intent,
        complexity=complexity,
        mode=mode,
        model_tier=model_tier,
        tools=tools,
        context_budget=context_budget,
        memory_policy=memory_policy,
        confidence=confidence,
        reasoning=reasoning,
    )