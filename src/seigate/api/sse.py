"""MCP over Server-Sent Events: one stream per client plus a POST endpoint for its messages."""

import asyncio
import logging
from typing import Annotated

import anyio
import pydantic
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from mcp import types
from mcp.server.lowlevel import Server
from sse_starlette.sse import EventSourceResponse

from seigate.api.deps import get_mcp_server, get_sessions
from seigate.exceptions import SessionNotFoundError, ValidationError
from seigate.mcp.server import run_session
from seigate.mcp.sessions import McpSession, SessionRegistry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["mcp"])

SessionsDep = Annotated[SessionRegistry, Depends(get_sessions)]

MESSAGES_PATH = "/messages"


async def _events(sessions: SessionRegistry, session: McpSession):
    try:
        yield {"event": "endpoint", "data": f"{MESSAGES_PATH}?sessionId={session.id}"}
        async for message in session.outbound_reader:
            yield {
                "event": "message",
                "data": message.message.model_dump_json(by_alias=True, exclude_none=True),
            }
    except (anyio.ClosedResourceError, anyio.EndOfStream):
        logger.debug("Outbound stream of session %s closed", session.id)
    finally:
        await sessions.close(session.id)


@router.get("/sse")
async def open_stream(
    sessions: SessionsDep,
    server: Annotated[Server, Depends(get_mcp_server)],
) -> EventSourceResponse:
    session = sessions.open()
    session.task = asyncio.create_task(run_session(server, session))
    return EventSourceResponse(_events(sessions, session))


def _resolve_session(sessions: SessionRegistry, session_id: str | None) -> McpSession:
    if not session_id:
        session = sessions.sole_session()
        if session is None:
            raise ValidationError(f"Missing sessionId ({len(sessions)} sessions open)")
        return session
    session = sessions.get(session_id)
    if session is None:
        raise SessionNotFoundError(f"Unknown session: {session_id}")
    return session


@router.post(MESSAGES_PATH, status_code=202)
async def post_message(
    request: Request,
    sessions: SessionsDep,
    session_id: Annotated[str | None, Query(alias="sessionId")] = None,
) -> JSONResponse:
    session = _resolve_session(sessions, session_id)
    body = await request.body()
    try:
        message = types.JSONRPCMessage.model_validate_json(body)
    except pydantic.ValidationError as exc:
        raise ValidationError(f"Invalid JSON-RPC message: {exc.error_count()} error(s)") from None

    await session.deliver(message)
    return JSONResponse(status_code=202, content={"status": "accepted"})
