# best-effort delivery of notifications to observers
import asyncio
import logging
from typing import List, Optional, Sequence

import httpx

from .config import NODE_ID, NOTIFY_TIMEOUT, OBSERVERS
from .events import AnyEvent

logger = logging.getLogger(__name__)


async def forward_events(
    events: Sequence[AnyEvent],
    observers: Optional[List[str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    """
    POST a batch of events to every observer and return how many accepted it.
    Delivery failures are logged and never reach the operation that emitted
    the events.
    """
    observers = OBSERVERS if observers is None else observers
    if not observers or not events:
        return 0

    payload = {"node": NODE_ID, "events": [e.model_dump(mode="json") for e in events]}
    async with httpx.AsyncClient(timeout=NOTIFY_TIMEOUT, transport=transport) as client:
        tasks = [client.post(f"{observer}/events", json=payload) for observer in observers]
        results = await asyncio.gather(*tasks, return_exceptions=True)

    delivered = 0
    for observer, res in zip(observers, results):
        if isinstance(res, Exception):
            logger.warning(f"observer {observer} unreachable: {res}")
        elif res.is_error:
            logger.warning(f"observer {observer} rejected events: HTTP {res.status_code}")
        else:
            delivered += 1
    return delivered
