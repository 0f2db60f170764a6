"""
FastAPI application for the Finance Chat Backend.

Exposes the financial record and the permission-aware chat endpoint,
with auto-generated OpenAPI documentation at /docs.
"""

from typing import Any, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src import __version__
from src.api.models import ChatRequest, ChatResponse, ErrorResponse, HealthResponse
from src.audit import create_correlation_id
from src.config import AppSettings, get_settings, validate_all_settings
from src.orchestrator import AppComponents, create_app_components
from src.services.llm import UpstreamError
from src.validation import InvalidRequestError


logger = structlog.get_logger(__name__)

API_TITLE = "Finance Chat API"
API_DESCRIPTION = "Mock financial record plus permission-filtered Gemini chat"

INVALID_REQUEST_MESSAGE = "Query and permissions are required."
UPSTREAM_ERROR_MESSAGE = "An error occurred while processing your request."


def _components(request: Request) -> AppComponents:
    return request.app.state.components


def create_app(
    components: Optional[AppComponents] = None,
    app_settings: Optional[AppSettings] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        components: Pre-built components (tests inject a fake generator here).
                    Defaults to the Gemini-backed components, which require
                    GEMINI_API_KEY.
        app_settings: Server settings. Defaults to environment.
    """
    app_settings = app_settings or get_settings().app
    components = components or create_app_components(app_settings=app_settings)

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.components = components

    # Enable CORS for any origin; this backend has no auth boundary
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_body(request: Request, exc: RequestValidationError):
        # Missing or non-JSON bodies land here before the chat flow runs
        logger.warning("malformed_request_body", path=request.url.path, errors=str(exc.errors()))
        return JSONResponse(status_code=400, content={"error": INVALID_REQUEST_MESSAGE})

    _register_routes(app)
    return app


def _register_routes(app: FastAPI) -> None:

    # ----------------------------------------------------------------
    # Health
    # ----------------------------------------------------------------

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health(request: Request):
        """
        Service status and provider configuration check.
        """
        status = validate_all_settings()
        generator = _components(request).chat_flow.generator
        return {
            "service": API_TITLE,
            "version": __version__,
            "status": "healthy",
            "provider": generator.name,
            "provider_configured": bool(status.get("gemini", False)),
        }

    # ----------------------------------------------------------------
    # Financial Data
    # ----------------------------------------------------------------

    @app.get("/api/financial-data", tags=["Financial Data"])
    def get_financial_data(request: Request) -> dict[str, Any]:
        """
        Full, unfiltered financial record.

        Used by the frontend on first load. Identical on every call.
        """
        components = _components(request)
        record = components.store.get_all().to_wire()
        components.audit_logger.log_financial_data_served(list(record.keys()))
        return record

    # ----------------------------------------------------------------
    # Chat
    # ----------------------------------------------------------------

    @app.post(
        "/api/chat",
        response_model=ChatResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        tags=["Chat"],
    )
    async def chat(body: ChatRequest, request: Request):
        """
        Answer a question using only the categories granted in `permissions`.

        - **400**: `query` or `permissions` missing
        - **500**: the LLM call failed (details are logged, not returned)
        """
        correlation_id = create_correlation_id()
        components = _components(request)
        flow = components.chat_flow

        try:
            answer = await flow.answer(
                question=body.query,
                permissions=body.permissions,
                correlation_id=correlation_id,
            )
        except InvalidRequestError:
            return JSONResponse(status_code=400, content={"error": INVALID_REQUEST_MESSAGE})
        except UpstreamError as e:
            logger.error(
                "chat_upstream_error",
                correlation_id=str(correlation_id),
                provider=e.provider,
                error=str(e),
                exc_info=True,
            )
            return JSONResponse(status_code=500, content={"error": UPSTREAM_ERROR_MESSAGE})
        except Exception as e:
            logger.error(
                "chat_unexpected_error",
                correlation_id=str(correlation_id),
                error=str(e),
                exc_info=True,
            )
            components.audit_logger.log_error(
                error_type="chat_unexpected_error",
                error_message=str(e),
                details={"exception": type(e).__name__},
                correlation_id=correlation_id,
            )
            return JSONResponse(status_code=500, content={"error": UPSTREAM_ERROR_MESSAGE})

        return {"response": answer.response}
