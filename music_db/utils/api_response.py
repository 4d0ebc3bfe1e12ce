"""
Standardized API response utilities.

This module provides helpers so every endpoint returns the same envelope:
``{"success": true, "data": ...}`` or ``{"success": false, "error": {...}}``.
"""

from typing import Any, Dict, Optional


def success_response(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    """
    Create a standardized success response.

    Args:
        data: The response data
        message: Optional success message

    Returns:
        Dict with standardized success response format
    """
    response = {"success": True}

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Create a standardized error response.

    Args:
        message: Error message
        code: Optional error code
        details: Optional additional error details

    Returns:
        Dict with standardized error response format
    """
    error = {"message": message}

    if code:
        error["code"] = code

    if details:
        error["details"] = details

    return {
        "success": False,
        "error": error
    }

