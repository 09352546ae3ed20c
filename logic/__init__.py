"""
Application Logic Layer for the Overboard Q&A Board

Business rules that are derived from the domain model rather than stored
in it.
"""

from logic.reputation import ReputationCalculator, ReputationBreakdown

__all__ = [
    'ReputationCalculator',
    'ReputationBreakdown',
]
