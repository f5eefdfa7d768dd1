"""Scoring strategies."""
from .scoring import DistinctTermStrategy, ScoringStrategy

__all__ = [
    "ScoringStrategy",
    "DistinctTermStrategy",
]
