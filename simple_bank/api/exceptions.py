from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, OperationalError

from ..core.errors import NotFoundError, TransactionRollbackError


logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(
        request: Request, exc: IntegrityError
    ) -> JSONResponse:
        logger.warning("db.integrity_error", extra={"path": request.url.path})
        return JSONResponse(
            status_code=409, content={"detail": "Request conflicts with ledger state"}
        )

    @app.exception_handler(OperationalError)
    async def operational_error_handler(
        request: Request, exc: OperationalError
    ) -> JSONResponse:
        # Lock timeouts, deadlocks and serialization failures land here.
        logger.warning("db.operational_error", extra={"path": request.url.path})
        return JSONResponse(
            status_code=503, content={"detail": "Ledger temporarily unavailable, retry"}
        )

    @app.exception_handler(TransactionRollbackError)
    async def rollback_error_handler(
        request: Request, exc: TransactionRollbackError
    ) -> JSONResponse:
        logger.error(
            "db.rollback_failed",
            extra={"path": request.url.path, "rollback_error": repr(exc.rollback_error)},
        )
        return JSONResponse(
            status_code=500, content={"detail": "Transfer failed and could not be rolled back"}
        )
