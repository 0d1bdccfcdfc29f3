"""FastAPI HTTP server for the neural debug service.

Exposes the three debug operations over HTTP:

    GET  /health   -> {"status": "ok", "active": true, "uptime_seconds": 3}
    GET  /status   -> {"status": "🧠 Linus Neural Core ativo — ..."}
    POST /command  <- {"command": "ping"}
    POST /log      <- {"tag": "boot", "message": "sensors online"}
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from pydantic import BaseModel, Field

from neuralcore.debug.service import NeuralDebugService

logger = logging.getLogger(__name__)


class CommandRequest(BaseModel):
    command: str = Field(description="Command name (e.g., 'ping', 'reboot')")


class LogRequest(BaseModel):
    tag: str = Field(description="Tag the message is filed under")
    message: str = Field(description="Message text")


class CommandResponse(BaseModel):
    result: str


class StatusResponse(BaseModel):
    status: str


class HealthResponse(BaseModel):
    status: str = "ok"
    active: bool = True
    uptime_seconds: int = 0


def create_app(service: NeuralDebugService | None = None) -> FastAPI:
    """Create the debug endpoint application.

    Args:
        service: Optional pre-built service (for testing). A fresh
                 instance is bound on startup otherwise.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        s = app.state.service
        if s is None:
            s = NeuralDebugService()
            app.state.service = s
        s.on_bind()
        yield
        s.on_unbind()
        s.destroy()

    app = FastAPI(
        title="neuralcore Debug Endpoint",
        description="Status, command and log operations of the Linus Neural Core",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.service = service

    @app.get("/health")
    async def health_check() -> HealthResponse:
        s: NeuralDebugService = app.state.service
        return HealthResponse(
            status="ok",
            active=s.is_active,
            uptime_seconds=s.uptime_seconds(),
        )

    @app.get("/status")
    async def get_status() -> StatusResponse:
        s: NeuralDebugService = app.state.service
        return StatusResponse(status=s.get_system_status())

    @app.post("/command")
    async def run_command(request: CommandRequest) -> CommandResponse:
        s: NeuralDebugService = app.state.service
        return CommandResponse(result=s.run_command(request.command))

    @app.post("/log")
    async def log_message(request: LogRequest) -> dict[str, str]:
        s: NeuralDebugService = app.state.service
        s.log_message(request.tag, request.message)
        return {"status": "ok"}

    return app
