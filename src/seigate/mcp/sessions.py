"""Registry of live MCP-over-SSE sessions."""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field

import anyio
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream
from mcp import types
from mcp.shared.message import SessionMessage

logger = logging.getLogger(__name__)


@dataclass
class McpSession:
    """One connected client: the server reads ``inbound`` and writes ``outbound``."""

    id: str
    inbound_writer: MemoryObjectSendStream[SessionMessage | Exception]
    inbound_reader: MemoryObjectReceiveStream[SessionMessage | Exception]
    outbound_writer: MemoryObjectSendStream[SessionMessage]
    outbound_reader: MemoryObjectReceiveStream[SessionMessage]
    task: asyncio.Task | None = field(default=None, repr=False)

    async def deliver(self, message: types.JSONRPCMessage) -> None:
        await self.inbound_writer.send(SessionMessage(message))

    async def aclose(self) -> None:
        if self.task is not None:
            if not self.task.done():
                self.task.cancel()
                try:
                    await self.task
                except asyncio.CancelledError:
                    pass
            elif not self.task.cancelled() and self.task.exception() is not None:
                logger.warning("MCP session %s ended with error: %r", self.id, self.task.exception())
        for stream in (self.inbound_writer, self.inbound_reader, self.outbound_writer, self.outbound_reader):
            await stream.aclose()


class SessionRegistry:
    """Session id -> session. Entries are added on connect and removed on disconnect or shutdown."""

    def __init__(self) -> None:
        self._sessions: dict[str, McpSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    @property
    def session_ids(self) -> list[str]:
        return list(self._sessions)

    def open(self) -> McpSession:
        inbound_writer, inbound_reader = anyio.create_memory_object_stream[SessionMessage | Exception](0)
        outbound_writer, outbound_reader = anyio.create_memory_object_stream[SessionMessage](0)
        session = McpSession(
            id=str(uuid.uuid4()),
            inbound_writer=inbound_writer,
            inbound_reader=inbound_reader,
            outbound_writer=outbound_writer,
            outbound_reader=outbound_reader,
        )
        self._sessions[session.id] = session
        logger.info("MCP session %s opened (%d active)", session.id, len(self._sessions))
        return session

    def get(self, session_id: str) -> McpSession | None:
        return self._sessions.get(session_id)

    def sole_session(self) -> McpSession | None:
        """The only open session, if exactly one is open."""
        if len(self._sessions) == 1:
            return next(iter(self._sessions.values()))
        return None

    async def close(self, session_id: str) -> None:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return
        await session.aclose()
        logger.info("MCP session %s closed (%d active)", session_id, len(self._sessions))

    async def close_all(self) -> None:
        for session_id in list(self._sessions):
            await self.close(session_id)
