# notifications emitted for external observers
import logging
from typing import Callable, List, Literal, Union

from pydantic import BaseModel

from .models import WorkflowPhase

logger = logging.getLogger(__name__)


class Event(BaseModel):
    sequence: int = 0


class Authorized(Event):
    kind: Literal["Authorized"] = "Authorized"
    address: str


class VoterRegistered(Event):
    kind: Literal["VoterRegistered"] = "VoterRegistered"
    address: str


class WorkflowStatusChange(Event):
    kind: Literal["WorkflowStatusChange"] = "WorkflowStatusChange"
    previous: WorkflowPhase
    new: WorkflowPhase


class ProposalRegistered(Event):
    kind: Literal["ProposalRegistered"] = "ProposalRegistered"
    proposal_id: int


class Voted(Event):
    kind: Literal["Voted"] = "Voted"
    address: str
    proposal_id: int


AnyEvent = Union[Authorized, VoterRegistered, WorkflowStatusChange, ProposalRegistered, Voted]


class EventLog:
    """
    Append-only record of emitted notifications.

    Each event gets the next sequence number; subscribers are called
    synchronously in emission order. Nothing inside the ballot core reads
    the log back.
    """

    def __init__(self):
        self._events: List[AnyEvent] = []
        self._subscribers: List[Callable[[AnyEvent], None]] = []

    def emit(self, event: AnyEvent) -> AnyEvent:
        event.sequence = len(self._events) + 1
        self._events.append(event)
        logger.info(f"event #{event.sequence} {event.kind}: {event.model_dump(exclude={'kind', 'sequence'})}")
        for callback in self._subscribers:
            try:
                callback(event)
            except Exception:
                logger.exception(f"subscriber {callback!r} failed on event #{event.sequence}")
        return event

    def subscribe(self, callback: Callable[[AnyEvent], None]) -> None:
        self._subscribers.append(callback)

    def since(self, sequence: int = 0) -> List[AnyEvent]:
        """Events with a sequence number strictly greater than ``sequence``."""
        return [e.model_copy() for e in self._events[max(sequence, 0):]]

    def __len__(self) -> int:
        return len(self._events)
