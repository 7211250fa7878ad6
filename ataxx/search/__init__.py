"""Adversarial move search."""

from .minimax import SearchConfig, SearchEngine, SearchStats

__all__ = ["SearchConfig", "SearchEngine", "SearchStats"]
