"""Arm selection strategies."""

from .Strategy import Strategy, STRATEGIES, build_strategy, select_arm

__all__ = ["Strategy", "STRATEGIES", "build_strategy", "select_arm"]
