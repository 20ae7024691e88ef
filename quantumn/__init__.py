"""Prompt routing, keyword retrieval, file tools and local model server supervision for a coding assistant."""

__version__ = "0.1.0"