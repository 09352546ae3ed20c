"""
Domain models for the Overboard Q&A Board.

This module contains:
- Board, the aggregate root and user factory
- User, the actor that asks, answers, votes and accepts
- Question and Answer, the two kinds of votable Post
"""

from models.post import Post, VoteTally
from models.question import Question
from models.answer import Answer
from models.user import User
from models.board import Board

__all__ = [
    'Post',
    'VoteTally',
    'Question',
    'Answer',
    'User',
    'Board',
]
