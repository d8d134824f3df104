"""HTTP session management.

curl_cffi binds an ``AsyncSession`` to the event loop it first runs on, so
one shared session is kept per running loop.
"""

import asyncio

from curl_cffi.requests import AsyncSession
from loguru import logger


_sessions: dict[asyncio.AbstractEventLoop, AsyncSession] = {}


def _forget_closed_loops() -> None:
    # Sessions of a closed loop cannot be awaited any more; drop them
    for loop in [loop for loop in _sessions if loop.is_closed()]:
        del _sessions[loop]


async def get_session() -> AsyncSession:
    """Get or create the async session shared on the running loop."""
    _forget_closed_loops()
    loop = asyncio.get_running_loop()
    session = _sessions.get(loop)
    if session is None:
        logger.debug("Opening shared HTTP session")
        session = _sessions[loop] = AsyncSession()
    return session


async def close_session() -> None:
    """Close the session shared on the running loop."""
    session = _sessions.pop(asyncio.get_running_loop(), None)
    if session is not None:
        await session.close()
        logger.debug("Closed shared HTTP session")
    _forget_closed_loops()
