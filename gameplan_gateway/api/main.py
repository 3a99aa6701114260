"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from gameplan_gateway.api.dependencies import get_request_id
from gameplan_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from gameplan_gateway.api.v1 import chat, loan
from gameplan_gateway.domain.exceptions import InvalidInputError
from gameplan_gateway.infrastructure.observability.logging import setup_logging
from gameplan_gateway.infrastructure.observability.metrics import record_invalid_input
from gameplan_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)

INVALID_LOAN_MESSAGE = "Invalid input. Please provide positive numbers for amount, rate, and duration."
INVALID_CHAT_MESSAGE = "Invalid input. Please provide a message."
INVALID_REQUEST_MESSAGE = "Invalid input."

# Keyed on the matched endpoint so messages follow the handler, not its mount path
INVALID_INPUT_MESSAGES = {
    loan.calculate_loan: INVALID_LOAN_MESSAGE,
    chat.chat: INVALID_CHAT_MESSAGE,
}


def _invalid_input_response(request: Request, reason: str) -> JSONResponse:
    """Log a rejected request and build the 400 body for its endpoint"""
    request_id = get_request_id(request)
    endpoint = request.scope.get("endpoint")
    message = INVALID_INPUT_MESSAGES.get(endpoint, INVALID_REQUEST_MESSAGE)
    if endpoint is loan.calculate_loan:
        record_invalid_input()

    logging.warning(f"Invalid input: {reason}", extra={"request_id": request_id, "path": request.url.path})
    return JSONResponse(status_code=400, content={"error": message})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="GamePlan Gateway",
        description="Loan amortization and help chat service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    @app.exception_handler(InvalidInputError)
    async def handle_invalid_input(request: Request, exc: InvalidInputError):
        return _invalid_input_response(request, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        reasons = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return _invalid_input_response(request, reasons)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Welcome to the GamePlan Backend!"

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(loan.router, tags=["loans"])
    app.include_router(chat.router, tags=["chat"])

    return app


app = create_app()
