"""
Ballot orchestration.

BallotService owns the workflow controller and both registries. Each public
operation checks the phase, then every other precondition, and only then
mutates, all under one lock, so a call either fully applies or raises with
nothing changed.
"""
import logging
import threading
from typing import List, Sequence

from .errors import AlreadyVoted, HasNotVoted, NoProposals, OutOfRange, Unauthorized
from .events import AnyEvent, EventLog, Voted
from .models import ProposalInfo, TallyResult, VoterInfo, WorkflowPhase, WorkflowStatus
from .proposals import ProposalRegistry
from .voters import VoterRegistry
from .workflow import WorkflowController

logger = logging.getLogger(__name__)


def winning_index(counts: Sequence[int]) -> int:
    """
    Index of the strictly greatest count; on a tie the lowest index wins
    because the running maximum is only replaced by a larger value.
    """
    if not counts:
        raise NoProposals("no proposals were registered")
    best = 0
    for i in range(1, len(counts)):
        if counts[i] > counts[best]:
            best = i
    return best


class BallotService:
    def __init__(self):
        self.events = EventLog()
        self.workflow = WorkflowController(self.events)
        self.voters = VoterRegistry(self.events)
        self.proposals = ProposalRegistry(self.events)
        self._lock = threading.RLock()

    # --- administrator operations ---

    def authorize(self, address: str, is_admin: bool) -> VoterInfo:
        with self._lock:
            if not is_admin:
                raise Unauthorized("authorize is restricted to the administrator")
            self.workflow.require_phase(WorkflowPhase.REGISTERING_VOTERS)
            self.voters.authorize(address)
            address = address.strip()
            logger.info(f"authorized {address}")
            return self.voters.info(address)

    def set_phase(self, target: int, is_admin: bool) -> WorkflowStatus:
        with self._lock:
            self.workflow.set_phase(target, is_admin)
            return self.workflow.status()

    def advance_phase(self, is_admin: bool) -> WorkflowStatus:
        with self._lock:
            self.workflow.advance_phase(is_admin)
            return self.workflow.status()

    def transition(self, name: str, is_admin: bool) -> WorkflowStatus:
        """Run one of the named workflow transitions, e.g. ``start-voting``."""
        if not is_admin:
            raise Unauthorized(f"transition {name!r} is restricted to the administrator")
        step = NAMED_TRANSITIONS.get(name)
        if step is None:
            raise OutOfRange(f"unknown transition {name!r}")
        with self._lock:
            getattr(self.workflow, step)(is_admin)
            return self.workflow.status()

    # --- voter operations ---

    def register(self, caller: str) -> VoterInfo:
        with self._lock:
            self.workflow.require_phase(WorkflowPhase.REGISTERING_VOTERS)
            self.voters.register(caller)
            logger.info(f"registered {caller}")
            return self.voters.info(caller)

    def submit_proposal(self, caller: str, description: str) -> int:
        with self._lock:
            self.workflow.require_phase(WorkflowPhase.PROPOSALS_REGISTRATION_STARTED)
            self.voters.require_registered(caller)
            proposal_id = self.proposals.submit(description)
            logger.info(f"{caller} submitted proposal {proposal_id}")
            return proposal_id

    def cast_vote(self, caller: str, proposal_id: int) -> VoterInfo:
        with self._lock:
            self.workflow.require_phase(WorkflowPhase.VOTING_SESSION_STARTED)
            voter = self.voters.require_registered(caller)
            if voter.has_voted:
                raise AlreadyVoted(f"{caller} has already voted")
            self.proposals.check_id(proposal_id)

            self.proposals.increment_vote(proposal_id)
            voter.has_voted = True
            voter.voted_proposal_id = proposal_id
            self.events.emit(Voted(address=caller, proposal_id=proposal_id))
            return self.voters.info(caller)

    def change_vote(self, caller: str, new_proposal_id: int) -> VoterInfo:
        with self._lock:
            self.workflow.require_phase(WorkflowPhase.VOTING_SESSION_STARTED)
            voter = self.voters.get(caller)
            if not voter.has_voted:
                raise HasNotVoted(f"{caller} has no vote to change")
            self.proposals.check_id(new_proposal_id)

            old = voter.voted_proposal_id
            self.proposals.decrement_vote(old)
            self.proposals.increment_vote(new_proposal_id)
            voter.voted_proposal_id = new_proposal_id
            logger.info(f"{caller} moved vote {old} -> {new_proposal_id}")
            self.events.emit(Voted(address=caller, proposal_id=new_proposal_id))
            return self.voters.info(caller)

    # --- results ---

    def tally(self) -> int:
        with self._lock:
            self.workflow.require_phase(WorkflowPhase.VOTES_TALLIED)
            return winning_index(self.proposals.counts())

    def winning_description(self) -> str:
        return self.result().description

    def result(self) -> TallyResult:
        with self._lock:
            winner = self.proposals.get(self.tally())
            return TallyResult(**winner.model_dump())

    # --- reads ---

    def voter_info(self, address: str) -> VoterInfo:
        with self._lock:
            return self.voters.info(address)

    def proposal(self, proposal_id: int) -> ProposalInfo:
        with self._lock:
            return self.proposals.get(proposal_id)

    def list_proposals(self) -> List[ProposalInfo]:
        with self._lock:
            return self.proposals.list()

    def workflow_status(self) -> WorkflowStatus:
        with self._lock:
            return self.workflow.status()

    def events_since(self, sequence: int = 0) -> List[AnyEvent]:
        with self._lock:
            return self.events.since(sequence)

    def event_count(self) -> int:
        with self._lock:
            return len(self.events)

    def summary(self) -> dict:
        with self._lock:
            return {
                "phase": self.workflow.current.name,
                "proposals": len(self.proposals),
                "registered_voters": self.voters.registered_count(),
                "votes": self.proposals.total_votes(),
            }


NAMED_TRANSITIONS = {
    "start-proposals": "start_proposals_registration",
    "end-proposals": "end_proposals_registration",
    "start-voting": "start_voting_session",
    "end-voting": "end_voting_session",
    "tally": "tally_votes",
}
