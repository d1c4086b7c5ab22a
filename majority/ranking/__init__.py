"""Majority-system ranking: pairwise comparisons and tie-breaking."""

from .system import MajoritySystem

__all__ = ["MajoritySystem"]
