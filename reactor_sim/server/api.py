"""
Reactor Control Room API

FastAPI application exposing the reactor: state snapshots, operator actions,
a Server-Sent Events stream of state changes and the static control room
frontend.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import StreamingResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from ..commands import apply_action
from ..exceptions import UnknownActionError
from ..reactor import Reactor
from .broadcast import Broadcaster
from .config import ServerConfig
from .driver import TickDriver
from .schemas import ActionRequest, ReactorStateResponse, serialize_snapshot

logger = logging.getLogger(__name__)


SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")


def reject_other_methods(app: FastAPI, path: str, allowed: List[str]) -> None:
    """
    Answer 405 on path for every method outside allowed

    Registered ahead of the static mount at "/", which otherwise fully
    matches these paths for the wrong methods and answers 404.
    """
    allow = ", ".join(allowed)

    async def method_not_allowed():
        raise HTTPException(status_code=405, detail="method not allowed", headers={"Allow": allow})

    methods = [method for method in HTTP_METHODS if method not in allowed]
    app.add_api_route(path, method_not_allowed, methods=methods, include_in_schema=False)


def format_event(message: str) -> str:
    return f"data: {message}\n\n"


async def event_stream(reactor: Reactor, broadcaster: Broadcaster) -> AsyncIterator[str]:
    """
    SSE messages for one client: the current snapshot, then every broadcast

    The subscription is released when the client disconnects and the
    generator is closed.
    """
    subscription = broadcaster.subscribe()
    try:
        yield format_event(serialize_snapshot(reactor.snapshot()))
        while True:
            message = await subscription.receive()
            yield format_event(message)
    finally:
        broadcaster.unsubscribe(subscription)


def create_app(config: Optional[ServerConfig] = None, reactor: Optional[Reactor] = None) -> FastAPI:
    """
    Build the FastAPI application

    The tick loop runs for the lifetime of the application.

    Args:
        config: Server configuration
        reactor: Reactor to serve (a new seeded reactor if None)

    Returns:
        Configured FastAPI app
    """
    config = config or ServerConfig()
    reactor = reactor or Reactor(seed=config.seed)
    broadcaster = Broadcaster()
    driver = TickDriver(reactor, broadcaster, interval=config.tick_interval, dt=config.tick_dt)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        driver.start()
        try:
            yield
        finally:
            await driver.stop()

    app = FastAPI(
        title="Reactor Control Room API",
        description="Real-time nuclear reactor simulation",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.reactor = reactor
    app.state.broadcaster = broadcaster
    app.state.driver = driver

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "subscribers": broadcaster.subscriber_count,
            "ticks": driver.tick_count,
        }

    @app.get("/api/state", response_model=ReactorStateResponse)
    def get_state():
        """Get current reactor state"""
        return ReactorStateResponse.from_snapshot(reactor.snapshot())

    @app.get("/api/constants")
    def get_constants():
        """Simulation constants, keyed by upper-case name"""
        return reactor.constants.as_wire_dict()

    @app.post("/api/action", status_code=204)
    async def perform_action(request: Request):
        """Perform an operator action"""
        body = await request.body()
        try:
            action = ActionRequest.model_validate_json(body)
        except ValidationError as e:
            logger.warning(f"Rejected malformed action request: {e.error_count()} error(s)")
            raise HTTPException(status_code=400, detail="bad request")

        try:
            apply_action(reactor, action.type, action.value)
        except UnknownActionError as e:
            logger.warning(f"Rejected action: {e}")
            raise HTTPException(status_code=400, detail="unknown action")

        return Response(status_code=204)

    @app.get("/events")
    async def events():
        """Server-Sent Events stream of reactor state changes"""
        return StreamingResponse(
            event_stream(reactor, broadcaster),
            media_type="text/event-stream",
            headers=SSE_HEADERS,
        )

    for path, allowed in (
        ("/health", ["GET"]),
        ("/api/state", ["GET"]),
        ("/api/constants", ["GET"]),
        ("/api/action", ["POST"]),
        ("/events", ["GET"]),
    ):
        reject_other_methods(app, path, allowed)

    static_dir = config.resolve_static_dir()
    if static_dir is not None:
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
        logger.info(f"Serving static files from {static_dir}")
    else:
        logger.info("No static directory found, frontend not served")

    return app
