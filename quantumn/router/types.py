"""Core data types for the routing pipeline."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum, IntEnum


class Intent(Enum):
    """Task type classified from a user prompt."""

    READ = "read"
    WRITE = "write"
    EDIT = "edit"
    DELETE = "delete"
    BASH = "bash"
    GIT = "git"
    GREP = "grep"
    GLOB = "glob"
    FIND = "find"
    EXPLAIN = "explain"
    REVIEW = "review"
    DEBUG = "debug"
    PLAN = "plan"
    DESIGN = "design"
    HELP = "help"
    CHAT = "chat"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class Complexity(IntEnum):
    """Estimated task difficulty, ordered from trivial to heavy."""

    TRIVIAL = 0
    SIMPLE = 1
    MODERATE = 2
    COMPLEX = 3
    HEAVY = 4

    @property
    def label(self) -> str:
        """Lower-case name of the level."""
        return self.name.lower()

    def score(self) -> int:
        """Numeric score for threshold comparisons."""
        return int(self)

    def __str__(self) -> str:
        return self.label


class AgentMode(Enum):
    """Execution mode for the current task."""

    CHAT = "chat"
    PLAN = "plan"
    BUILD = "build"
    REVIEW = "review"
    DEBUG = "debug"

    def can_transition_to(self, target: AgentMode) -> bool:
        """Whether the mode state machine allows moving to ``target``."""
        if self is target:
            return True
        return (self, target) in _ALLOWED_TRANSITIONS

    def instruction(self) -> str:
        """Instruction injected into the system prompt for this mode."""
        return _MODE_INSTRUCTIONS[self]

    def __str__(self) -> str:
        return self.value


_ALLOWED_TRANSITIONS = frozenset(
    {
        (AgentMode.CHAT, AgentMode.PLAN),
        (AgentMode.CHAT, AgentMode.BUILD),
        (AgentMode.PLAN, AgentMode.BUILD),
        (AgentMode.BUILD, AgentMode.PLAN),
        (AgentMode.CHAT, AgentMode.REVIEW),
        (AgentMode.CHAT, AgentMode.DEBUG),
        (AgentMode.BUILD, AgentMode.DEBUG),
    }
)

_MODE_INSTRUCTIONS = {
    AgentMode.CHAT: "Answer directly. Suggest tools only if needed.",
    AgentMode.PLAN: "Analyze and plan. Do NOT execute. Read-only.",
    AgentMode.BUILD: "Implement changes. Verify. Report progress.",
    AgentMode.REVIEW: "Review code. Report issues and suggestions.",
    AgentMode.DEBUG: "Investigate. Find root cause. Suggest fix.",
}


class ModelTier(Enum):
    """Capability level used to choose a model."""

    LOCAL = "local"
    OPENCODE = "opencode"
    FAST = "fast"
    STANDARD = "standard"
    CAPABLE = "capable"

    def default_model(self) -> str:
        """Default model name for this tier."""
        return _DEFAULT_MODELS[self]

    def __str__(self) -> str:
        return self.value


_DEFAULT_MODELS = {
    ModelTier.LOCAL: "llama3.2:latest",
    ModelTier.OPENCODE: "qwen-2.5-coder-7b",
    ModelTier.FAST: "claude-haiku-4-20250514",
    ModelTier.STANDARD: "claude-sonnet-4-20250514",
    ModelTier.CAPABLE: "claude-opus-4-20250514",
}


class ContextBudget(IntEnum):
    """Token budget for conversation context."""

    MINIMAL = 4_000
    RELEVANT = 16_000
    STANDARD = 50_000
    COMPREHENSIVE = 100_000

    @property
    def label(self) -> str:
        """Lower-case name of the budget."""
        return self.name.lower()

    def tokens(self) -> int:
        """Number of tokens in this budget."""
        return int(self)

    @classmethod
    def from_complexity(cls, complexity: Complexity) -> ContextBudget:
        """Base budget for a complexity level."""
        return _BUDGET_BY_COMPLEXITY[complexity]


_BUDGET_BY_COMPLEXITY = {
    Complexity.TRIVIAL: ContextBudget.MINIMAL,
    Complexity.SIMPLE: ContextBudget.MINIMAL,
    Complexity.MODERATE: ContextBudget.RELEVANT,
    Complexity.COMPLEX: ContextBudget.STANDARD,
    Complexity.HEAVY: ContextBudget.COMPREHENSIVE,
}


class MemoryPolicy(Enum):
    """Memory loading strategy."""

    NONE = "none"
    RECENT = "recent"
    RELEVANT = "relevant"
    FULL = "full"

    def __str__(self) -> str:
        return self.value


@dataclass
class ToolPolicy:
    """Tool permissions for one routing decision."""

    allowed_tools: list[str] = field(default_factory=list)
    disallowed_tools: list[str] = field(default_factory=list)
    require_confirmation: bool = False

    @classmethod
    def default_policy(cls) -> ToolPolicy:
        """All basic tools allowed."""
        return cls(allowed_tools=["Read", "Write", "Bash", "Grep", "Glob"])

    @classmethod
    def read_only(cls) -> ToolPolicy:
        """Reading and searching only."""
        return cls(
            allowed_tools=["Read", "Grep", "Glob"],
            disallowed_tools=["Write", "Bash"],
        )

    def with_confirmation(self) -> ToolPolicy:
        """A copy of this policy that requires confirmation."""
        return dataclasses.replace(
            self,
            allowed_tools=list(self.allowed_tools),
            disallowed_tools=list(self.disallowed_tools),
            require_confirmation=True,
        )

    def is_tool_allowed(self, tool_name: str) -> bool:
        """Case-insensitive check against the allowed tools."""
        wanted = tool_name.lower()
        return any(tool.lower() == wanted for tool in self.allowed_tools)


@dataclass
class RoutingDecision:
    """Complete output of the routing pipeline."""

    intent: Intent
    complexity: Complexity
    mode: AgentMode
    model_tier: ModelTier
    tools: ToolPolicy
    context_budget: ContextBudget
    memory_policy: MemoryPolicy
    confidence: float
    reasoning: str

    @classmethod
    def default(cls) -> RoutingDecision:
        """Chat-mode decision with all basic tools allowed."""
        return cls(
            intent=Intent.CHAT,
            complexity=Complexity.SIMPLE,
            mode=AgentMode.CHAT,
            model_tier=ModelTier.FAST,
            tools=ToolPolicy.default_policy(),
            context_budget=ContextBudget.MINIMAL,
            memory_policy=MemoryPolicy.NONE,
            confidence=0.5,
            reasoning="default routing",
        )


@dataclass
class RagRouterConfig:
    """Retrieval settings used by the router."""

    enabled: bool = True
    max_chunks: int = 5
    similarity_threshold: float = 0.3


@dataclass
class PromptCompactionConfig:
    """Prompt compaction settings."""

    enabled: bool = True
    target_tokens: int = 1000
    remove_filler: bool = True


@dataclass
class RouterConfig:
    """Configuration for routing behaviour."""

    prefer_local: bool = False
    cost_limit: float = 1.0
    rag: RagRouterConfig = field(default_factory=RagRouterConfig)
    prompt_compaction: PromptCompactionConfig = field(
        default_factory=PromptCompactionConfig
    )