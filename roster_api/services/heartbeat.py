"""Server-Sent Events heartbeat stream for roster clients.

The stream carries no roster data; it only keeps the connection warm. The
response layer cancels the generator when the client goes away.
"""
import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

logger = logging.getLogger(__name__)


def heartbeat_event(now: Optional[datetime] = None) -> str:
    """One SSE frame: ``data: {"type":"heartbeat","timestamp":...}``."""
    moment = now or datetime.now(timezone.utc)
    payload = {"type": "heartbeat", "timestamp": moment.isoformat()}
    return f"data: {json.dumps(payload, separators=(',', ':'))}\n\n"


async def heartbeat_stream(interval: float, username: str = "") -> AsyncIterator[str]:
    logger.info("SSE client connected (%s)", username or "anonymous")
    try:
        while True:
            await asyncio.sleep(interval)
            yield heartbeat_event()
    finally:
        logger.info("SSE client disconnected (%s)", username or "anonymous")
