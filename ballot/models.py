from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, Field


class WorkflowPhase(IntEnum):
    REGISTERING_VOTERS = 0
    PROPOSALS_REGISTRATION_STARTED = 1
    PROPOSALS_REGISTRATION_ENDED = 2
    VOTING_SESSION_STARTED = 3
    VOTING_SESSION_ENDED = 4
    VOTES_TALLIED = 5


class Voter(BaseModel):
    """
    Per-address voter record.
    has_voted is True exactly when voted_proposal_id is set.
    """
    authorized: bool = False
    registered: bool = False
    has_voted: bool = False
    voted_proposal_id: Optional[int] = None


class Proposal(BaseModel):
    description: str
    vote_count: int = 0


class VoterInfo(BaseModel):
    address: str
    authorized: bool
    registered: bool
    has_voted: bool
    voted_proposal_id: Optional[int] = None


class ProposalInfo(BaseModel):
    proposal_id: int
    description: str
    vote_count: int


class WorkflowStatus(BaseModel):
    previous: WorkflowPhase
    current: WorkflowPhase
    previous_name: str
    current_name: str


class TallyResult(BaseModel):
    proposal_id: int
    description: str
    vote_count: int


# Request bodies

class AuthorizeIn(BaseModel):
    address: str = Field(..., examples=["0x5B38Da6a701c568545dCfcB03FcB875f56beddC4"])


class PhaseIn(BaseModel):
    target: int = Field(..., examples=[1])


class ProposalIn(BaseModel):
    description: str = Field(..., examples=["Plan X"])


class VoteIn(BaseModel):
    proposal_id: int = Field(..., examples=[0])
