# ordered proposals + vote counters
import logging
from typing import List

from .errors import CounterUnderflow, EmptyDescription, OutOfRange
from .events import EventLog, ProposalRegistered
from .models import Proposal, ProposalInfo

logger = logging.getLogger(__name__)


class ProposalRegistry:
    """
    Append-only sequence of proposals; the list index is the proposal id.
    """

    def __init__(self, events: EventLog):
        self.events = events
        self._proposals: List[Proposal] = []

    def __len__(self) -> int:
        return len(self._proposals)

    def check_id(self, proposal_id: int) -> None:
        if not 0 <= proposal_id < len(self._proposals):
            raise OutOfRange(f"proposal {proposal_id} does not exist")

    def submit(self, description: str) -> int:
        if not description or not description.strip():
            raise EmptyDescription("proposal description must not be empty")
        self._proposals.append(Proposal(description=description))
        proposal_id = len(self._proposals) - 1
        self.events.emit(ProposalRegistered(proposal_id=proposal_id))
        return proposal_id

    def get(self, proposal_id: int) -> ProposalInfo:
        self.check_id(proposal_id)
        p = self._proposals[proposal_id]
        return ProposalInfo(proposal_id=proposal_id, description=p.description, vote_count=p.vote_count)

    def list(self) -> List[ProposalInfo]:
        return [
            ProposalInfo(proposal_id=i, description=p.description, vote_count=p.vote_count)
            for i, p in enumerate(self._proposals)
        ]

    def counts(self) -> List[int]:
        return [p.vote_count for p in self._proposals]

    def total_votes(self) -> int:
        return sum(self.counts())

    def increment_vote(self, proposal_id: int) -> int:
        self.check_id(proposal_id)
        proposal = self._proposals[proposal_id]
        proposal.vote_count += 1
        return proposal.vote_count

    def decrement_vote(self, proposal_id: int) -> int:
        self.check_id(proposal_id)
        proposal = self._proposals[proposal_id]
        if proposal.vote_count == 0:
            raise CounterUnderflow(f"proposal {proposal_id} has no vote to remove")
        proposal.vote_count -= 1
        return proposal.vote_count
