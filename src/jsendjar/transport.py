"""FastAPI glue: turn envelopes into JSON responses.

The envelope itself never touches HTTP; handlers either return ``send(env)``
or let ``install_exception_handlers`` render failures as JSend documents.
"""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from jsendjar.envelope import ResponseEnvelope
from jsendjar.errors import JarError
from jsendjar.utils.logger_util import get_logger

logger = get_logger(__name__)

MEDIA_TYPE = "application/json"


def send(envelope: ResponseEnvelope, status_code: int = 200) -> JSONResponse:
    """Serialize ``envelope`` into an ``application/json`` response."""
    return JSONResponse(
        content=envelope.document().model_dump(mode="json"),
        status_code=status_code,
        media_type=MEDIA_TYPE,
    )


def get_envelope() -> ResponseEnvelope:
    """FastAPI dependency: a fresh envelope per request."""
    return ResponseEnvelope()


async def _jar_error_handler(request: Request, exc: JarError) -> JSONResponse:
    logger.warning("%s while handling %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
    env = ResponseEnvelope().mark_error(str(exc), type(exc).__name__)
    if exc.hint:
        env.add_data("hint", exc.hint)
    return send(env, status_code=500)


async def _http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    env = ResponseEnvelope().mark_error(str(exc.detail or "request failed"), str(exc.status_code))
    return send(env, status_code=exc.status_code)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # JSend "fail": the submitted data was rejected
    errors = [
        {"loc": ".".join(str(p) for p in err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    env = ResponseEnvelope().mark_fail().add_data("errors", errors)
    return send(env, status_code=422)


def install_exception_handlers(app: FastAPI) -> FastAPI:
    app.add_exception_handler(JarError, _jar_error_handler)
    app.add_exception_handler(HTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    return app
