"""
Election workflow state machine.

The controller owns the current phase and the phase it replaced. Every gated
operation asks it ``require_phase`` before touching the registries, and the
transition operations are the only writers of the phase.
"""
import logging

from .errors import OutOfRange, PhaseMismatch, Unauthorized
from .events import EventLog, WorkflowStatusChange
from .models import WorkflowPhase, WorkflowStatus

logger = logging.getLogger(__name__)

LAST_PHASE = max(WorkflowPhase)


def _require_admin(is_admin: bool, operation: str) -> None:
    if not is_admin:
        raise Unauthorized(f"{operation} is restricted to the administrator")


class WorkflowController:
    def __init__(self, events: EventLog):
        self.events = events
        self.current = WorkflowPhase.REGISTERING_VOTERS
        self.previous = WorkflowPhase.REGISTERING_VOTERS

    def require_phase(self, expected: WorkflowPhase) -> None:
        if self.current != expected:
            raise PhaseMismatch(expected, self.current)

    def status(self) -> WorkflowStatus:
        return WorkflowStatus(
            previous=self.previous,
            current=self.current,
            previous_name=self.previous.name,
            current_name=self.current.name,
        )

    def set_phase(self, target: int, is_admin: bool) -> WorkflowPhase:
        """
        Move to any valid phase, backward included, so the administrator
        can correct a mistaken transition.
        """
        _require_admin(is_admin, "set_phase")
        try:
            phase = WorkflowPhase(target)
        except ValueError:
            raise OutOfRange(f"phase {target} is not in 0..{int(LAST_PHASE)}") from None
        return self._transition(phase)

    def advance_phase(self, is_admin: bool) -> WorkflowPhase:
        _require_admin(is_admin, "advance_phase")
        if self.current == LAST_PHASE:
            raise OutOfRange(f"no phase after {LAST_PHASE.name}")
        return self._transition(WorkflowPhase(self.current + 1))

    # Named transitions: each one only fires from the phase right before it.

    def start_proposals_registration(self, is_admin: bool) -> WorkflowPhase:
        return self._step(WorkflowPhase.PROPOSALS_REGISTRATION_STARTED, is_admin)

    def end_proposals_registration(self, is_admin: bool) -> WorkflowPhase:
        return self._step(WorkflowPhase.PROPOSALS_REGISTRATION_ENDED, is_admin)

    def start_voting_session(self, is_admin: bool) -> WorkflowPhase:
        return self._step(WorkflowPhase.VOTING_SESSION_STARTED, is_admin)

    def end_voting_session(self, is_admin: bool) -> WorkflowPhase:
        return self._step(WorkflowPhase.VOTING_SESSION_ENDED, is_admin)

    def tally_votes(self, is_admin: bool) -> WorkflowPhase:
        return self._step(WorkflowPhase.VOTES_TALLIED, is_admin)

    def _step(self, target: WorkflowPhase, is_admin: bool) -> WorkflowPhase:
        _require_admin(is_admin, f"transition to {target.name}")
        self.require_phase(WorkflowPhase(target - 1))
        return self._transition(target)

    def _transition(self, target: WorkflowPhase) -> WorkflowPhase:
        self.previous, self.current = self.current, target
        if target < self.previous:
            logger.warning(f"workflow moved backward: {self.previous.name} -> {target.name}")
        else:
            logger.info(f"workflow: {self.previous.name} -> {target.name}")
        self.events.emit(WorkflowStatusChange(previous=self.previous, new=target))
        return target
