"""
Error handling middleware for the application.

This module provides centralized error handling so that every endpoint
reports failures in the same JSON envelope.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from music_db.exceptions import ChangesetError, MusicDBError, NotFoundError
from music_db.utils.api_response import error_response

logger = logging.getLogger(__name__)


def add_error_handlers(app: FastAPI) -> None:
    """
    Add error handlers to the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle HTTP exceptions."""
        logger.warning(f"HTTP exception: {exc.detail} (status_code={exc.status_code})")
        return JSONResponse(
            content=error_response(message=str(exc.detail), code="http_error"),
            status_code=exc.status_code
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request validation errors."""
        error_messages = []
        for error in exc.errors():
            loc = " -> ".join(str(loc_item) for loc_item in error["loc"])
            error_messages.append(f"{loc}: {error['msg']}")

        logger.warning(f"Validation error: {', '.join(error_messages)}")
        return JSONResponse(
            content=error_response(
                message="Validation error",
                code="validation_error",
                details={"errors": error_messages}
            ),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
        )

    @app.exception_handler(ChangesetError)
    async def changeset_error_handler(request: Request, exc: ChangesetError) -> JSONResponse:
        """Handle params that failed changeset validation."""
        logger.info(f"Changeset rejected: {exc.errors}")
        return JSONResponse(
            content=error_response(
                message=str(exc),
                code="invalid_changeset",
                details={"errors": exc.errors}
            ),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        """Handle missing artists, albums and genres."""
        error_msg = str(exc) or "Not found"
        logger.warning(f"Not found: {error_msg}")
        return JSONResponse(
            content=error_response(message=error_msg, code="not_found"),
            status_code=status.HTTP_404_NOT_FOUND
        )

    @app.exception_handler(MusicDBError)
    async def music_db_error_handler(request: Request, exc: MusicDBError) -> JSONResponse:
        """Handle general catalog errors."""
        error_msg = str(exc) or "Error processing request"
        logger.error(f"Catalog error: {error_msg}")
        return JSONResponse(
            content=error_response(message=error_msg, code="music_db_error"),
            status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """Handle database errors."""
        logger.error(f"Database error: {str(exc)}")
        return JSONResponse(
            content=error_response(message="Database error occurred", code="database_error"),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle all other exceptions."""
        logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
        return JSONResponse(
            content=error_response(
                message="An unexpected error occurred",
                code="server_error",
                details={"type": type(exc).__name__}
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
