"""
Reputation scoring for the Overboard Q&A Board.

Reputation is never stored. It is recomputed from the votes and acceptances
on a user's posts every time it is asked for.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from config.config_manager import ReputationRules

if TYPE_CHECKING:
    from models.answer import Answer
    from models.question import Question


logger = logging.getLogger(__name__)


@dataclass
class ReputationBreakdown:
    """Reputation split by the rule that produced it."""
    question_up_votes: int = 0
    question_down_votes: int = 0
    answer_up_votes: int = 0
    answer_down_votes: int = 0
    accepted_answers: int = 0

    @property
    def total(self) -> int:
        return (
            self.question_up_votes
            + self.question_down_votes
            + self.answer_up_votes
            + self.answer_down_votes
            + self.accepted_answers
        )


class ReputationCalculator:
    """
    Applies a set of ReputationRules to a user's questions and answers.

    With the default rules a question up-vote is worth 5, an answer up-vote
    10, an answer down-vote -1 and an accepted answer 15. Question down-votes
    are worth nothing. The total may be negative.
    """

    def __init__(self, rules: Optional[ReputationRules] = None):
        self.rules = rules or ReputationRules()

    def breakdown(
        self,
        questions: Iterable[Question],
        answers: Iterable[Answer]
    ) -> ReputationBreakdown:
        """
        Score each rule separately.

        Args:
            questions: Questions authored by the user
            answers: Answers authored by the user

        Returns:
            ReputationBreakdown with one subtotal per rule
        """
        result = ReputationBreakdown()

        for question in questions:
            result.question_up_votes += question.up_votes * self.rules.question_up_vote
            result.question_down_votes += question.down_votes * self.rules.question_down_vote

        for answer in answers:
            result.answer_up_votes += answer.up_votes * self.rules.answer_up_vote
            result.answer_down_votes += answer.down_votes * self.rules.answer_down_vote
            if answer.is_accepted():
                result.accepted_answers += self.rules.accepted_answer

        return result

    def calculate(
        self,
        questions: Iterable[Question],
        answers: Iterable[Answer]
    ) -> int:
        """Total reputation earned from the given questions and answers."""
        result = self.breakdown(questions, answers)
        logger.debug(f"Reputation computed: {result}")
        return result.total
