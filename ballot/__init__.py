"""
Single-election ballot node.

Administrators whitelist voters, voters register and submit proposals, then
cast (and may change) one vote each; once votes are tallied anyone can read
the winning proposal.
"""

from .errors import (
    AlreadyAuthorized,
    AlreadyVoted,
    BallotError,
    CounterUnderflow,
    EmptyDescription,
    HasNotVoted,
    InvalidAddress,
    NoProposals,
    NotAuthorized,
    NotRegistered,
    OutOfRange,
    PhaseMismatch,
    Unauthorized,
)
from .models import WorkflowPhase
from .service import BallotService, winning_index

__all__ = [
    "BallotService",
    "WorkflowPhase",
    "winning_index",
    "BallotError",
    "PhaseMismatch",
    "Unauthorized",
    "NotAuthorized",
    "NotRegistered",
    "AlreadyVoted",
    "HasNotVoted",
    "OutOfRange",
    "InvalidAddress",
    "AlreadyAuthorized",
    "EmptyDescription",
    "NoProposals",
    "CounterUnderflow",
]
