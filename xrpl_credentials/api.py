"""
HTTP surface for credential signing requests.

Routes:
    GET  /health              plain-text liveness + ledger connection state
    POST /credential          prepare a CredentialCreate, return sign URL
    POST /credential/accept   prepare a CredentialAccept, return sign URL

Routers are built by factories closed over their dependencies (gateway,
ledger connection); ``create_app`` wires them and owns the lifespan of
the ledger connection.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field

from xrpl_credentials.config import ALLOWED_ORIGINS, Settings, get_settings
from xrpl_credentials.errors import CredentialRequestError
from xrpl_credentials.handlers import (
    AcceptRequest,
    CreateRequest,
    Gateway,
    prepare_accept,
    prepare_create,
)
from xrpl_credentials.ledger import LedgerConnection
from xrpl_credentials.signing.gateway import SigningGateway
from xrpl_credentials.signing.transport import HttpxTransport

logger = logging.getLogger(__name__)


# =========================================================================
# Request bodies
# =========================================================================


class CreateCredentialBody(BaseModel):
    """POST /credential body. Presence is checked by the handler."""

    model_config = ConfigDict(populate_by_name=True)

    subject: str | None = None
    credential_type: str | None = Field(default=None, alias="credentialType")
    requester: str | None = None
    uri: str | None = None
    already_encoded: bool | None = Field(default=None, alias="alreadyEncoded")

    def to_request(self) -> CreateRequest:
        return CreateRequest(
            subject=self.subject,
            credential_type=self.credential_type,
            requester=self.requester,
            uri=self.uri,
            already_encoded=self.already_encoded,
        )


class AcceptCredentialBody(BaseModel):
    """POST /credential/accept body."""

    model_config = ConfigDict(populate_by_name=True)

    issuer: str | None = None
    subject: str | None = None
    credential_type: str | None = Field(default=None, alias="credentialType")
    already_encoded: bool | None = Field(default=None, alias="alreadyEncoded")

    def to_request(self) -> AcceptRequest:
        return AcceptRequest(
            issuer=self.issuer,
            subject=self.subject,
            credential_type=self.credential_type,
            already_encoded=self.already_encoded,
        )


# =========================================================================
# Routers
# =========================================================================


def create_health_router(ledger: LedgerConnection) -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/health", response_class=PlainTextResponse)
    def health() -> PlainTextResponse:
        return PlainTextResponse("ok\n--\n" + ("True" if ledger.is_connected() else "False"))

    return router


def create_credential_router(gateway: Gateway) -> APIRouter:
    router = APIRouter(prefix="/credential", tags=["credential"])

    @router.post("")
    async def create_credential(body: CreateCredentialBody | None = None) -> dict[str, Any]:
        """Prepare a CredentialCreate and return its signing link."""
        body = body or CreateCredentialBody()
        prepared = await prepare_create(body.to_request(), gateway)
        return {
            "ok": True,
            "message": "CredentialCreate payload prepared",
            "preparedTransaction": prepared.transaction.to_txjson(),
            "signUrl": prepared.payload.sign_url,
            "uuid": prepared.payload.uuid,
        }

    @router.post("/accept")
    async def accept_credential(body: AcceptCredentialBody | None = None) -> dict[str, Any]:
        """Prepare a CredentialAccept (signed by the subject) and return its signing link."""
        body = body or AcceptCredentialBody()
        prepared = await prepare_accept(body.to_request(), gateway)
        return {
            "ok": True,
            "message": "CredentialAccept payload prepared",
            "signUrl": prepared.payload.sign_url,
            "uuid": prepared.payload.uuid,
            "preparedTransaction": prepared.transaction.to_txjson(),
        }

    return router


# =========================================================================
# Exception handlers
# =========================================================================


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(CredentialRequestError)
    async def credential_error_handler(
        request: Request, exc: CredentialRequestError
    ) -> JSONResponse:
        if exc.status_code < 500:
            logger.warning(
                exc.message,
                extra={"path": request.url.path, "code": str(exc.code)},
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning(
            "Malformed request body",
            extra={"path": request.url.path, "errors": len(exc.errors())},
        )
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})


# =========================================================================
# Application factory
# =========================================================================


def build_gateway(settings: Settings) -> SigningGateway:
    return SigningGateway(
        settings.xumm_api_key,
        settings.xumm_api_secret,
        options=settings.signing_options(),
        api_url=settings.xumm_api_url,
        transport=HttpxTransport(timeout=settings.signing_timeout_seconds),
    )


def create_app(
    settings: Settings | None = None,
    *,
    gateway: Gateway | None = None,
    ledger: LedgerConnection | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Defaults to environment-sourced settings.
        gateway: Signing gateway. Built from settings if omitted.
        ledger: Ledger connection. Built from settings if omitted.

    Raises:
        ValueError: If no gateway is given and the signing-service
            key/secret are not configured.
    """
    settings = settings or get_settings()
    gateway = gateway or build_gateway(settings)
    ledger = ledger or LedgerConnection(settings.xrpl_endpoint)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await ledger.connect()
        try:
            yield
        finally:
            await ledger.close()

    app = FastAPI(title="XRPL Credentials", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    register_exception_handlers(app)
    app.include_router(create_health_router(ledger))
    app.include_router(create_credential_router(gateway))
    return app
