"""Prompt routing: intent, complexity, mode, model tier, tool policy, context budget and memory policy."""