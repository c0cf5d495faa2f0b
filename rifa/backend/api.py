"""FastAPI endpoints for listing, claiming and resetting raffle numbers."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .store import ParticipantStore, StoreRejection, create_store

logger = logging.getLogger(__name__)


class ParticipantPayload(BaseModel):
    name: str
    numbers: list[int]


class StatusResponse(BaseModel):
    ok: bool


def create_app(store: ParticipantStore | None = None) -> FastAPI:
    app = FastAPI(title="Rifa API", version="1.0.0")
    participant_store = store if store is not None else create_store()

    # The board is served from a browser origin different from the API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreRejection)
    async def handle_rejection(request: Request, exc: StoreRejection) -> JSONResponse:
        logger.info("Claim rejected: %s", exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"error": "Datos de participante inválidos"})

    def get_store() -> ParticipantStore:
        return participant_store

    @app.get("/participants", response_model=list[ParticipantPayload])
    def list_participants(local_store: ParticipantStore = Depends(get_store)) -> list[ParticipantPayload]:
        return [
            ParticipantPayload(**record.to_payload())
            for record in local_store.list_participants()
        ]

    @app.post("/participants", response_model=ParticipantPayload)
    def add_participant(
        payload: ParticipantPayload,
        local_store: ParticipantStore = Depends(get_store),
    ) -> ParticipantPayload:
        record = local_store.add_participant(name=payload.name, numbers=payload.numbers)
        return ParticipantPayload(**record.to_payload())

    @app.delete("/reset", response_model=StatusResponse)
    def reset(local_store: ParticipantStore = Depends(get_store)) -> StatusResponse:
        local_store.reset()
        return StatusResponse(ok=True)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
