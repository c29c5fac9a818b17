"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.router import api_router
from app.config import DEFAULT_JWT_SECRET, get_settings
from app.context import AppContext, build_context
from app.db.engine import create_tables
from app.errors import ComplaintDeskError, InternalError
from app.logging_config import init_logging
from app.services.upload_store import URL_PREFIX

logger = logging.getLogger(__name__)


async def _handle_app_error(request: Request, exc: ComplaintDeskError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.error,
                     exc_info=exc)
    content = {"success": False, "message": exc.message}
    if exc.error:
        content["error"] = exc.error
    return JSONResponse(status_code=exc.status_code, content=content)


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s raised an unhandled error", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={
        "success": False,
        "message": "Internal server error",
        "error": str(exc),
    })


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"success": False, "message": "Invalid request body"})


def create_app(context: AppContext | None = None) -> FastAPI:
    """Build the app. Without a context, one is built from settings at startup."""
    settings = context.settings if context else get_settings()
    init_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ctx: AppContext = app.state.context
        try:
            await create_tables(ctx.engine)
            logger.info("Connected to database")
        except Exception as e:
            logger.error("Database connection failed: %s", e)
        if ctx.settings.jwt_secret == DEFAULT_JWT_SECRET:
            logger.warning("jwt_secret is the built-in default; set JWT_SECRET in production")
        logger.info("Serving attachments from %s as %s", ctx.uploads.directory, ctx.settings.base_url + URL_PREFIX)
        yield
        await ctx.dispose()

    app = FastAPI(
        title="Complaint Desk",
        description="Complaint intake with attachments and an admin-gated listing.",
        version="0.1.0",
        lifespan=lifespan,
    )

    ctx = context or build_context(settings)
    ctx.uploads.ensure_dir()
    app.state.context = ctx

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ComplaintDeskError, _handle_app_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(Exception, _handle_unexpected)

    app.include_router(api_router)
    app.mount(URL_PREFIX, StaticFiles(directory=str(ctx.uploads.directory)), name="uploads")

    return app
