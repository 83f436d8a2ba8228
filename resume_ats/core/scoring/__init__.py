"""
Scoring engines built on the parsed resume record.
"""

from .advanced import AdvancedScorer, calculate_advanced_score, calculate_years_of_experience
from .confidence import calculate_confidence_score, round_half_up

__all__ = [
    "AdvancedScorer",
    "calculate_advanced_score",
    "calculate_years_of_experience",
    "calculate_confidence_score",
    "round_half_up",
]
