"""Intent classification, complexity scoring and file-scope estimation."""

from __future__ import annotations

import re

from quantumn.router.types import Complexity, Intent


def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


# Order matters: the first pattern that matches decides the intent.
_INTENT_PATTERNS: tuple[tuple[re.Pattern[str], Intent], ...] = tuple(
    (_compile(pattern), intent)
    for pattern, intent in (
        (r"^(?:read|view|show|cat|open|get)\s+\S+", Intent.READ),
        (r"^(?:write|create|new|touch)\s+\S+", Intent.WRITE),
        (r"^(?:edit|modify|update|change)\s+\S+", Intent.EDIT),
        (r"^(?:delete|remove|rm|del|unlink)\s+\S+", Intent.DELETE),
        (r"^(?:run|exec|execute|bash|shell|cmd|sh)\s+", Intent.BASH),
        (r"^(?:git|commit|push|pull|branch|merge|checkout|clone)\s*", Intent.GIT),
        (r"^(?:grep|rg|search|rip)\s+", Intent.GREP),
        (r"^(?:glob|find files)", Intent.GLOB),
        (r"^(?:find|locate)\s+(?:file|path)", Intent.FIND),
        (r"^(?:explain|what is|how does|tell me about|describe)\s+", Intent.EXPLAIN),
        (r"^(?:review|check|analyze|audit)\s+", Intent.REVIEW),
        (r"^(?:debug|debugger|breakpoint|trace|inspect)\s+", Intent.DEBUG),
        (r"^(?:plan|design|architecture|decompose)\s+", Intent.PLAN),
        (r"^(?:design|architect|blueprint)\s+", Intent.DESIGN),
        (r"^(?:help|\?|usage|commands|man)\s*\Z", Intent.HELP),
        (r"^(?:hi|hello|hey|howdy|sup)\s*\Z", Intent.CHAT),
        (r"^(?:thanks|thank you|thx)\s*\Z", Intent.CHAT),
    )
)

# Each pattern contributes its weight once if it matches anywhere.
_COMPLEXITY_PATTERNS: tuple[tuple[re.Pattern[str], int], ...] = tuple(
    (_compile(pattern), weight)
    for pattern, weight in (
        (r"\b(?:ls|dir|pwd|whoami|date|echo)\s*\Z", -3),
        (r"\b(?:trivia|quick|simple|easy|just)\s*\Z", -2),
        (r"\b(?:read|view|show|get|list)\b", 1),
        (r"\b(?:file|path|dir|directory)\b", 1),
        (r"\b(?:write|create|edit|modify|update)\b", 2),
        (r"\b(?:function|method|class|module|struct|enum|trait)\b", 2),
        (r"\b(?:test|spec|assert|expect)\b", 2),
        (r"\b(?:refactor|optimize|migrate|port|convert)\b", 3),
        (r"\b(?:algorithm|data structure|performance|cache|concurrency)\b", 3),
        (r"\b(?:api|rest|graphql|protocol|network)\b", 3),
        (r"\b(?:security|authentication|authorization|encryption)\b", 4),
        (r"\b(?:architecture|microservice|distributed|system design)\b", 4),
        (r"\b(?:machine learning|ai|llm|neural|transformer)\b", 4),
        (r"\b(?:full.stack|multi.platform|integration)\b", 4),
    )
)

_FILE_INDICATORS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern)
    for pattern in (
        r"\S+\.\S+",
        r"src/",
        r"lib/",
        r"tests?/",
    )
)

_MULTI_FILE_KEYWORDS = (
    "all files",
    "multiple files",
    "every file",
    "entire",
    "whole codebase",
    "all source",
    "recursive",
)


def classify_intent(prompt: str) -> Intent:
    """Classify a prompt into an intent; the first matching pattern wins."""
    prompt = prompt.strip()
    if not prompt:
        return Intent.UNKNOWN
    return next(
        (intent for pattern, intent in _INTENT_PATTERNS if pattern.search(prompt)),
        Intent.UNKNOWN,
    )


def score_complexity(prompt: str) -> Complexity:
    """Sum the weights of matching keyword patterns, clamped to 0..4.

    An empty prompt is treated as simple.
    """
    prompt = prompt.strip()
    if not prompt:
        return Complexity.SIMPLE
    score = sum(
        weight for pattern, weight in _COMPLEXITY_PATTERNS if pattern.search(prompt)
    )
    return Complexity(min(max(score, 0), 4))


def estimate_file_scope(prompt: str) -> int:
    """Estimate how many files a task is likely to involve."""
    indicator_count = sum(
        sum(1 for _ in pattern.finditer(prompt)) for pattern in _FILE_INDICATORS
    )
    lowered = prompt.lower()
    keyword_count = sum(1 for keyword in _MULTI_FILE_KEYWORDS if keyword in lowered)
    return indicator_count + keyword_count