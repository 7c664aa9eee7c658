"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool

from app.api.errors import BadRequest, InternalError
from app.api.validation import parse_ask_request
from app.config import settings
from app.llm.chain import get_support_chain
from app.models.qa import AskResponse

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

app = FastAPI(
    title="Support Bot",
    description="Product support question answering over a vector knowledge base",
    version="0.1.0",
)


@app.middleware("http")
async def add_cors_headers(request: Request, call_next) -> Response:
    response = await call_next(request)
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


@app.exception_handler(BadRequest)
async def bad_request_handler(request: Request, exc: BadRequest) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.exception_handler(InternalError)
async def internal_error_handler(request: Request, exc: InternalError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.get("/health")
def health() -> dict[str, str]:
    """Simple readiness probe."""
    return {"status": "ok"}


@app.options("/{full_path:path}")
def preflight(full_path: str) -> Response:
    """CORS preflight; the middleware supplies the headers."""
    return Response(status_code=200)


@app.post("/")
async def ask(request: Request) -> JSONResponse:
    """Answer a product question using the knowledge base and the chat so far."""
    try:
        body = await request.json()
        payload = parse_ask_request(body)
        chain = get_support_chain()
        answer = await run_in_threadpool(chain.invoke, payload.question, payload.conv_history)
    except BadRequest:
        raise
    except Exception as exc:
        logger.exception("Failed to answer question: %s", exc)
        raise InternalError() from exc

    return JSONResponse(AskResponse(question=payload.question, answer=answer).model_dump())
