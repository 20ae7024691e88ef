"""Model tier selection, default models and cost estimates."""

from __future__ import annotations

from quantumn.router.types import AgentMode, Complexity, Intent, ModelTier, RouterConfig

_COST_PER_1K = {
    ModelTier.LOCAL: 0.0,
    ModelTier.OPENCODE: 0.0,
    ModelTier.FAST: 0.1,
    ModelTier.STANDARD: 0.6,
    ModelTier.CAPABLE: 3.0,
}


def pick_model_tier(
    complexity: Complexity,
    intent: Intent,
    mode: AgentMode,
    config: RouterConfig,
) -> ModelTier:
    """Choose a model tier from complexity, intent, mode and configuration."""
    if complexity >= Complexity.COMPLEX:
        return ModelTier.CAPABLE
    if intent in (Intent.PLAN, Intent.DESIGN, Intent.REVIEW, Intent.DEBUG):
        return ModelTier.STANDARD
    if mode is AgentMode.BUILD and complexity >= Complexity.MODERATE:
        return ModelTier.STANDARD
    if complexity <= Complexity.SIMPLE:
        return ModelTier.LOCAL if config.prefer_local else ModelTier.FAST
    return ModelTier.STANDARD


def get_model_for_tier(tier: ModelTier) -> str:
    """Default model name for a tier."""
    return tier.default_model()


def tier_supports_streaming(tier: ModelTier) -> bool:
    """Whether a tier supports streaming responses; every tier does."""
    return True


def estimate_cost_per_1k(tier: ModelTier) -> float:
    """Estimated cost per thousand tokens for a tier."""
    return _COST_PER_1K[tier]