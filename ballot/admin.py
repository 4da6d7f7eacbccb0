from fastapi import APIRouter, Depends

from .deps import caller_address, is_admin, publish_since
from .models import AuthorizeIn, PhaseIn
from .service import BallotService
from .state import get_service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/voters")
async def authorize_voter(
    body: AuthorizeIn,
    caller: str = Depends(caller_address),
    service: BallotService = Depends(get_service),
):
    seq = service.event_count()
    info = service.authorize(body.address, is_admin(caller))
    await publish_since(service, seq)
    return {"ok": True, "voter": info.model_dump()}


@router.post("/phase")
async def set_phase(
    body: PhaseIn,
    caller: str = Depends(caller_address),
    service: BallotService = Depends(get_service),
):
    seq = service.event_count()
    status = service.set_phase(body.target, is_admin(caller))
    await publish_since(service, seq)
    return {"ok": True, "workflow": status.model_dump()}


@router.post("/phase/advance")
async def advance_phase(
    caller: str = Depends(caller_address),
    service: BallotService = Depends(get_service),
):
    seq = service.event_count()
    status = service.advance_phase(is_admin(caller))
    await publish_since(service, seq)
    return {"ok": True, "workflow": status.model_dump()}


@router.post("/phase/{transition}")
async def named_transition(
    transition: str,
    caller: str = Depends(caller_address),
    service: BallotService = Depends(get_service),
):
    """start-proposals, end-proposals, start-voting, end-voting or tally."""
    seq = service.event_count()
    status = service.transition(transition, is_admin(caller))
    await publish_since(service, seq)
    return {"ok": True, "workflow": status.model_dump()}
