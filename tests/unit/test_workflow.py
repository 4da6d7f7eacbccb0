"""
Unit tests for the workflow state machine.
"""

import pytest

from ballot.errors import OutOfRange, PhaseMismatch, Unauthorized
from ballot.events import EventLog
from ballot.models import WorkflowPhase
from ballot.workflow import WorkflowController


@pytest.fixture
def controller():
    return WorkflowController(EventLog())


@pytest.mark.unit
def test_starts_registering_voters(controller):
    assert controller.current == WorkflowPhase.REGISTERING_VOTERS
    assert controller.previous == WorkflowPhase.REGISTERING_VOTERS
    assert len(controller.events) == 0


@pytest.mark.unit
def test_advance_walks_every_phase(controller):
    seen = [controller.current]
    for _ in range(5):
        seen.append(controller.advance_phase(is_admin=True))
    assert seen == list(WorkflowPhase)
    assert controller.previous == WorkflowPhase.VOTING_SESSION_ENDED


@pytest.mark.unit
def test_advance_past_terminal_phase_fails(controller):
    controller.set_phase(WorkflowPhase.VOTES_TALLIED, is_admin=True)
    events_before = len(controller.events)

    with pytest.raises(OutOfRange):
        controller.advance_phase(is_admin=True)

    assert controller.current == WorkflowPhase.VOTES_TALLIED
    assert len(controller.events) == events_before


@pytest.mark.unit
def test_advance_emits_status_change(controller):
    controller.advance_phase(is_admin=True)
    (event,) = controller.events.since(0)
    assert event.kind == "WorkflowStatusChange"
    assert event.previous == WorkflowPhase.REGISTERING_VOTERS
    assert event.new == WorkflowPhase.PROPOSALS_REGISTRATION_STARTED


@pytest.mark.unit
def test_set_phase_allows_backward_moves(controller):
    controller.set_phase(4, is_admin=True)
    controller.set_phase(1, is_admin=True)
    assert controller.current == WorkflowPhase.PROPOSALS_REGISTRATION_STARTED
    assert controller.previous == WorkflowPhase.VOTING_SESSION_ENDED


@pytest.mark.unit
@pytest.mark.parametrize("target", [-1, 6, 42])
def test_set_phase_rejects_invalid_ordinal(controller, target):
    with pytest.raises(OutOfRange):
        controller.set_phase(target, is_admin=True)
    assert controller.current == WorkflowPhase.REGISTERING_VOTERS
    assert len(controller.events) == 0


@pytest.mark.unit
def test_transitions_require_admin(controller):
    with pytest.raises(Unauthorized):
        controller.set_phase(1, is_admin=False)
    with pytest.raises(Unauthorized):
        controller.advance_phase(is_admin=False)
    with pytest.raises(Unauthorized):
        controller.start_proposals_registration(is_admin=False)
    assert controller.current == WorkflowPhase.REGISTERING_VOTERS


@pytest.mark.unit
def test_require_phase(controller):
    controller.require_phase(WorkflowPhase.REGISTERING_VOTERS)
    with pytest.raises(PhaseMismatch) as exc_info:
        controller.require_phase(WorkflowPhase.VOTING_SESSION_STARTED)
    assert exc_info.value.expected == WorkflowPhase.VOTING_SESSION_STARTED
    assert exc_info.value.current == WorkflowPhase.REGISTERING_VOTERS


@pytest.mark.unit
def test_named_transitions_in_order(controller):
    controller.start_proposals_registration(is_admin=True)
    controller.end_proposals_registration(is_admin=True)
    controller.start_voting_session(is_admin=True)
    controller.end_voting_session(is_admin=True)
    controller.tally_votes(is_admin=True)
    assert controller.current == WorkflowPhase.VOTES_TALLIED
    assert len(controller.events) == 5


@pytest.mark.unit
def test_named_transition_out_of_order_fails(controller):
    with pytest.raises(PhaseMismatch):
        controller.start_voting_session(is_admin=True)
    assert controller.current == WorkflowPhase.REGISTERING_VOTERS


@pytest.mark.unit
def test_status_snapshot(controller):
    controller.advance_phase(is_admin=True)
    status = controller.status()
    assert status.current_name == "PROPOSALS_REGISTRATION_STARTED"
    assert status.previous_name == "REGISTERING_VOTERS"
