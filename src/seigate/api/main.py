import logging
import traceback
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from starlette.requests import Request
from starlette.responses import JSONResponse

from seigate import __version__
from seigate.api.assistant import router as assistant_router
from seigate.api.blocks import router as blocks_router
from seigate.api.contracts import router as contracts_router
from seigate.api.deps import get_sessions
from seigate.api.market import router as market_router
from seigate.api.network import router as network_router
from seigate.api.nfts import router as nfts_router
from seigate.api.sse import router as sse_router
from seigate.api.tokens import router as tokens_router
from seigate.api.transactions import router as transactions_router
from seigate.api.transfers import router as transfers_router
from seigate.api.wallets import router as wallets_router
from seigate.container import Container
from seigate.exceptions import GatewayError
from seigate.mcp.sessions import SessionRegistry

logger = logging.getLogger("seigate.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = Container()
    app.state.container = container
    yield
    await container.sessions().close_all()
    await container.chain_clients().aclose()
    await container.http_client().aclose()
    await container.llm().aclose()


app = FastAPI(title="Sei Gateway", version=__version__, lifespan=lifespan)


@app.exception_handler(GatewayError)
async def gateway_exception_handler(request: Request, exc: GatewayError):
    if exc.status_code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg')}")
    return JSONResponse(status_code=400, content={"error": "; ".join(messages) or "Invalid request"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    logger.error("Unhandled error on %s %s:\n%s", request.method, request.url.path, "".join(tb))
    return JSONResponse(status_code=500, content={"error": str(exc)})


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(network_router)
app.include_router(blocks_router)
app.include_router(wallets_router)
app.include_router(transactions_router)
app.include_router(tokens_router)
app.include_router(nfts_router)
app.include_router(contracts_router)
app.include_router(transfers_router)
app.include_router(market_router)
app.include_router(assistant_router)
app.include_router(sse_router)


SessionsDep = Annotated[SessionRegistry, Depends(get_sessions)]


@app.get("/api/health")
async def health(sessions: SessionsDep):
    return {"status": "ok", "version": __version__, "active_sessions": len(sessions)}


@app.get("/")
async def index(request: Request, sessions: SessionsDep):
    endpoints = sorted(
        f"{method} {route.path}"
        for route in request.app.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    )
    return {
        "name": "seigate",
        "version": __version__,
        "endpoints": endpoints,
        "active_sessions": len(sessions),
    }
