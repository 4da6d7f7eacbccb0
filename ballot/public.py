from fastapi import APIRouter, Depends

from .deps import caller_address, publish_since
from .models import ProposalIn, VoteIn
from .service import BallotService
from .state import get_service

router = APIRouter(tags=["ballot"])


# ----------- voter operations -----------

@router.post("/voters/register")
async def register(
    caller: str = Depends(caller_address),
    service: BallotService = Depends(get_service),
):
    seq = service.event_count()
    info = service.register(caller)
    await publish_since(service, seq)
    return {"ok": True, "voter": info.model_dump()}


@router.post("/proposals")
async def submit_proposal(
    body: ProposalIn,
    caller: str = Depends(caller_address),
    service: BallotService = Depends(get_service),
):
    seq = service.event_count()
    proposal_id = service.submit_proposal(caller, body.description)
    await publish_since(service, seq)
    return {"ok": True, "proposal_id": proposal_id}


@router.post("/votes")
async def cast_vote(
    body: VoteIn,
    caller: str = Depends(caller_address),
    service: BallotService = Depends(get_service),
):
    seq = service.event_count()
    info = service.cast_vote(caller, body.proposal_id)
    await publish_since(service, seq)
    return {"ok": True, "voter": info.model_dump()}


@router.put("/votes")
async def change_vote(
    body: VoteIn,
    caller: str = Depends(caller_address),
    service: BallotService = Depends(get_service),
):
    seq = service.event_count()
    info = service.change_vote(caller, body.proposal_id)
    await publish_since(service, seq)
    return {"ok": True, "voter": info.model_dump()}


# ----------- reads (anyone) -----------

@router.get("/voters/{address}")
def get_voter(address: str, service: BallotService = Depends(get_service)):
    return service.voter_info(address).model_dump()


@router.get("/proposals")
def list_proposals(service: BallotService = Depends(get_service)):
    return {"proposals": [p.model_dump() for p in service.list_proposals()]}


@router.get("/proposals/{proposal_id}")
def get_proposal(proposal_id: int, service: BallotService = Depends(get_service)):
    return service.proposal(proposal_id).model_dump()


@router.get("/workflow")
def get_workflow(service: BallotService = Depends(get_service)):
    return service.workflow_status().model_dump()


@router.get("/results")
def get_results(service: BallotService = Depends(get_service)):
    return service.result().model_dump()


@router.get("/events")
def get_events(since: int = 0, service: BallotService = Depends(get_service)):
    return {"events": [e.model_dump(mode="json") for e in service.events_since(since)]}
