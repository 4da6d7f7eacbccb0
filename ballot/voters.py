# per-address voter records
import logging
import re
from typing import Dict, List

from .errors import AlreadyAuthorized, InvalidAddress, NotAuthorized, NotRegistered
from .events import Authorized, EventLog, VoterRegistered
from .models import Voter, VoterInfo

logger = logging.getLogger(__name__)

_ZERO_ADDRESS = re.compile(r"0x0*|0+", re.IGNORECASE)


def is_null_address(address: str) -> bool:
    """Empty, blank, or the all-zero placeholder address."""
    if address is None:
        return True
    address = address.strip()
    return not address or _ZERO_ADDRESS.fullmatch(address) is not None


class VoterRegistry:
    def __init__(self, events: EventLog):
        self.events = events
        self._voters: Dict[str, Voter] = {}

    def get(self, address: str) -> Voter:
        """
        Record for ``address``. Unknown addresses read as an all-false
        record but are not inserted.
        """
        voter = self._voters.get(address)
        return voter if voter is not None else Voter()

    def _ensure(self, address: str) -> Voter:
        if address not in self._voters:
            self._voters[address] = Voter()
        return self._voters[address]

    def authorize(self, address: str) -> Voter:
        if is_null_address(address):
            raise InvalidAddress(f"{address!r} is not a valid voter address")
        address = address.strip()
        if self.get(address).authorized:
            raise AlreadyAuthorized(f"{address} is already authorized")
        voter = self._ensure(address)
        voter.authorized = True
        self.events.emit(Authorized(address=address))
        return voter

    def register(self, address: str) -> Voter:
        voter = self.get(address)
        if not voter.authorized:
            raise NotAuthorized(f"{address} was never authorized to register")
        if voter.registered:
            # Re-confirmation keeps any recorded vote so counters stay in step.
            logger.info(f"{address} re-confirmed registration")
        else:
            voter.registered = True
            voter.has_voted = False
            voter.voted_proposal_id = None
        self.events.emit(VoterRegistered(address=address))
        return voter

    def require_registered(self, address: str) -> Voter:
        voter = self.get(address)
        if not voter.registered:
            raise NotRegistered(f"{address} is not a registered voter")
        return voter

    def info(self, address: str) -> VoterInfo:
        voter = self.get(address)
        return VoterInfo(address=address, **voter.model_dump())

    def voter_infos(self) -> List[VoterInfo]:
        return [self.info(address) for address in self._voters]

    def registered_count(self) -> int:
        return sum(1 for v in self._voters.values() if v.registered)

    def voted_count(self) -> int:
        return sum(1 for v in self._voters.values() if v.has_voted)
