# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""RPC endpoint.

Queries:   GET  /rpc/{name}?input=<url-encoded json>
Mutations: POST /rpc/{name} with the input as the JSON body

Successful calls answer {"result": {"data": ...}}; failures answer
{"error": {"code", "message", "procedure", "details"}} with the HTTP
status matching the code.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Query, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from lms_admin.api.dependencies import DbSession
from lms_admin.api.rpc.procedures import Procedure, ProcedureKind, get_procedure
from lms_admin.domains.errors import (
    AlreadyEnrolledError,
    EntityNotFoundError,
    OrganizationMismatchError,
)
from lms_admin.infrastructure.database.connection import DatabaseError
from lms_admin.utils.logging import bind_context, get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/rpc", tags=["RPC"])


class RPCError(Exception):
    """An error that maps directly onto an RPC error envelope."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details


def _error_response(error: RPCError, procedure: str) -> JSONResponse:
    body: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
        "procedure": procedure,
    }
    if error.details is not None:
        body["details"] = error.details
    return JSONResponse(status_code=error.status_code, content={"error": body})


def _validation_details(exc: ValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": [str(part) for part in err["loc"]], "msg": err["msg"], "type": err["type"]}
        for err in exc.errors(include_url=False)
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    parts = [f"{'.'.join(d['loc']) or 'input'}: {d['msg']}" for d in details]
    return "Invalid input: " + "; ".join(parts)


def _parse_json(raw: str | bytes | None) -> Any:
    if raw is None or raw in ("", b""):
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise RPCError(
            status.HTTP_400_BAD_REQUEST,
            "PARSE_ERROR",
            f"Input is not valid JSON: {e.msg}",
        ) from e


def _resolve(name: str, kind: ProcedureKind) -> Procedure:
    proc = get_procedure(name)
    if proc is None:
        raise RPCError(status.HTTP_404_NOT_FOUND, "NOT_FOUND", f"No procedure named {name}")
    if proc.kind != kind:
        method = "POST" if proc.kind == "mutation" else "GET"
        raise RPCError(
            status.HTTP_405_METHOD_NOT_ALLOWED,
            "METHOD_NOT_SUPPORTED",
            f"{name} is a {proc.kind}; call it with {method}",
        )
    return proc


def _validate(proc: Procedure, raw: Any) -> Any:
    if proc.input_model is None:
        return None
    try:
        return proc.input_model.model_validate(raw)
    except ValidationError as e:
        details = _validation_details(e)
        raise RPCError(
            status.HTTP_400_BAD_REQUEST,
            "BAD_REQUEST",
            _validation_message(details),
            details,
        ) from e


def _conflict(exc: IntegrityError) -> RPCError:
    return RPCError(status.HTTP_409_CONFLICT, "CONFLICT", str(exc.orig))


async def _call(proc: Procedure, db: DbSession, payload: Any) -> Any:
    try:
        return await proc.handler(db, payload)
    except EntityNotFoundError as e:
        raise RPCError(status.HTTP_404_NOT_FOUND, "NOT_FOUND", str(e)) from e
    except AlreadyEnrolledError as e:
        raise RPCError(status.HTTP_409_CONFLICT, "CONFLICT", str(e)) from e
    except OrganizationMismatchError as e:
        raise RPCError(status.HTTP_400_BAD_REQUEST, "BAD_REQUEST", str(e)) from e
    except IntegrityError as e:
        raise _conflict(e) from e
    except DatabaseError as e:
        if isinstance(e.original_error, IntegrityError):
            raise _conflict(e.original_error) from e
        raise


async def _dispatch(name: str, kind: ProcedureKind, raw: str | bytes | None, db: DbSession) -> JSONResponse:
    bind_context(procedure=name)
    try:
        proc = _resolve(name, kind)
        payload = _validate(proc, _parse_json(raw))
        data = await _call(proc, db, payload)
    except RPCError as e:
        logger.warning("RPC call failed", code=e.code, message=e.message)
        return _error_response(e, name)
    except Exception:
        logger.exception("RPC call raised an unexpected error")
        return _error_response(
            RPCError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_SERVER_ERROR",
                "Internal server error",
            ),
            name,
        )

    logger.debug("RPC call succeeded")
    return JSONResponse(content={"result": {"data": jsonable_encoder(data)}})


@router.get("/{name}")
async def call_query(
    name: str,
    db: DbSession,
    input: str | None = Query(default=None, description="JSON-encoded input"),
) -> JSONResponse:
    """Run a query procedure."""
    return await _dispatch(name, "query", input, db)


@router.post("/{name}")
async def call_mutation(name: str, request: Request, db: DbSession) -> JSONResponse:
    """Run a mutation procedure with the JSON request body as input."""
    return await _dispatch(name, "mutation", await request.body(), db)
