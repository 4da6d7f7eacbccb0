# request-scoped helpers shared by the routers
from fastapi import Header

from .config import ADMIN_ADDRESS, CALLER_HEADER
from .notify import forward_events
from .service import BallotService


def caller_address(caller: str = Header(..., alias=CALLER_HEADER)) -> str:
    """Identity already verified by the authentication layer in front of us."""
    return caller.strip()


def is_admin(caller: str) -> bool:
    return bool(caller) and caller == ADMIN_ADDRESS


async def publish_since(service: BallotService, sequence: int) -> int:
    """Forward every event emitted after ``sequence`` to the observers."""
    return await forward_events(service.events_since(sequence))
