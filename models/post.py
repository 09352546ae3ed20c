"""
Shared shape of everything that can be voted on.

Questions and answers each embed a VoteTally and expose it through the
Post protocol instead of inheriting vote state from a common base class.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, FrozenSet, Protocol, Set, runtime_checkable

if TYPE_CHECKING:
    from models.user import User


def new_id() -> str:
    """Generate a unique identifier for a user or post."""
    return str(uuid.uuid4())


class VoteTally:
    """
    Two disjoint voter sets for a single post.

    A user is never in both sets. Voting in the opposite direction moves the
    user from one set to the other; voting the same way twice changes nothing.
    """

    def __init__(self):
        self._up_voters: Set[User] = set()
        self._down_voters: Set[User] = set()

    def add_up_voter(self, voter: User) -> bool:
        """
        Record an up-vote.

        Returns:
            True if this is a new up-vote, False if the voter had already up-voted
        """
        if voter in self._up_voters:
            return False
        self._down_voters.discard(voter)
        self._up_voters.add(voter)
        return True

    def add_down_voter(self, voter: User) -> bool:
        """
        Record a down-vote.

        Returns:
            True if this is a new down-vote, False if the voter had already down-voted
        """
        if voter in self._down_voters:
            return False
        self._up_voters.discard(voter)
        self._down_voters.add(voter)
        return True

    def has_up_voted(self, voter: User) -> bool:
        return voter in self._up_voters

    def has_down_voted(self, voter: User) -> bool:
        return voter in self._down_voters

    def has_voted(self, voter: User) -> bool:
        return voter in self._up_voters or voter in self._down_voters

    @property
    def up_voters(self) -> FrozenSet[User]:
        return frozenset(self._up_voters)

    @property
    def down_voters(self) -> FrozenSet[User]:
        return frozenset(self._down_voters)

    @property
    def up_votes(self) -> int:
        return len(self._up_voters)

    @property
    def down_votes(self) -> int:
        return len(self._down_voters)

    def __repr__(self):
        return f"<VoteTally(up={self.up_votes}, down={self.down_votes})>"


@runtime_checkable
class Post(Protocol):
    """Anything a user can vote on: it has an author and a vote tally."""

    id: str
    created_at: datetime

    @property
    def author(self) -> User: ...

    @property
    def votes(self) -> VoteTally: ...

    @property
    def up_votes(self) -> int: ...

    @property
    def down_votes(self) -> int: ...

    def add_up_voter(self, voter: User) -> bool: ...

    def add_down_voter(self, voter: User) -> bool: ...
