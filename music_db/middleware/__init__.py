"""
Middleware and exception handlers for the FastAPI application.
"""

from music_db.middleware.error_handler import add_error_handlers

__all__ = ['add_error_handlers']
