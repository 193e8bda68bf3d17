"""
FastAPI entry point: HTTP surface for the stock advisor.

create_app() is the Composition Root for HTTP runs: without an injected use case
it loads Settings and wires the infrastructure adapters through the container.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:create_app --factory --reload --port 8000
"""

import json
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.application.use_cases.analyze_stock import AnalysisRequest, AnalyzeStockUseCase
from src.domain.exceptions import InvalidInputError
from src.domain.ports.observability_port import IObservabilityHandler
from src.infrastructure.config import load_settings
from src.infrastructure.entrypoints.container import build_analyze_use_case, build_observability
from src.infrastructure.entrypoints.http_errors import ERROR_STATUSES, error_response
from src.infrastructure.entrypoints.schemas import AnalysisResponse, ErrorResponse
from src.infrastructure.observability.logging_setup import configure_logging


def create_app(
    use_case: Optional[AnalyzeStockUseCase] = None,
    observability: Optional[IObservabilityHandler] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        use_case:      Pre-wired AnalyzeStockUseCase (tests inject one backed by fakes).
                       When omitted, settings are loaded and adapters wired here.
        observability: Handler flushed on shutdown; built from settings when omitted.
    """
    if use_case is None:
        settings = load_settings()
        configure_logging(settings.log_level)
        observability = observability or build_observability(settings)
        use_case = build_analyze_use_case(settings, observability)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        yield
        if observability is not None:
            observability.flush()

    app = FastAPI(title="Stock Advisor API", lifespan=lifespan)

    @app.post(
        "/api/agent",
        response_model=AnalysisResponse,
        responses={code: {"model": ErrorResponse} for code in ERROR_STATUSES},
    )
    async def analyze_stock(request: Request):
        """Analyze one symbol: trend, suggestion, price bands and optional commentary."""
        try:
            try:
                payload = await request.json()
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                raise InvalidInputError("request body must be valid JSON") from exc
            analysis_request = AnalysisRequest.from_payload(payload)
            result = await use_case.handle(analysis_request)
        except Exception as exc:
            status, body = error_response(exc)
            return JSONResponse(status_code=status, content=body)
        return JSONResponse(content=AnalysisResponse.from_result(result).to_payload())

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
