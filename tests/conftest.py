"""
Shared pytest configuration and fixtures for the ballot node.
"""

import pytest

from ballot.models import WorkflowPhase
from ballot.service import BallotService

ADMIN = True
ALICE = "0xA11CE00000000000000000000000000000000001"
BOB = "0xB0B0000000000000000000000000000000000002"
CAROL = "0xCA201000000000000000000000000000000000003"


@pytest.fixture
def service():
    """A fresh election in RegisteringVoters."""
    return BallotService()


@pytest.fixture
def voting_service(service):
    """
    Alice, Bob and Carol registered, three proposals submitted,
    voting session open.
    """
    for address in (ALICE, BOB, CAROL):
        service.authorize(address, ADMIN)
        service.register(address)
    service.set_phase(WorkflowPhase.PROPOSALS_REGISTRATION_STARTED, ADMIN)
    service.submit_proposal(ALICE, "Plan X")
    service.submit_proposal(BOB, "Plan Y")
    service.submit_proposal(CAROL, "Plan Z")
    service.set_phase(WorkflowPhase.VOTING_SESSION_STARTED, ADMIN)
    return service


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (HTTP surface)"
    )
    config.addinivalue_line(
        "markers", "invariant: marks tests as vote-bookkeeping invariant validation"
    )
    config.addinivalue_line(
        "markers", "smoke: marks tests as smoke tests (basic functionality check)"
    )
