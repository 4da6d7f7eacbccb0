# in-memory election state
from .service import BallotService

# One election per process; persistence across restarts is left to the host.
service = BallotService()


def get_service() -> BallotService:
    return service


def reset_service() -> BallotService:
    """Start a fresh election. Used by tests and local tooling."""
    global service
    service = BallotService()
    return service
