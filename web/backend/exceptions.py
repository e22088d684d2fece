#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    title = "Error"


class ProfileNotFoundException(ServiceException):
    """Raised when no stored profile exists for a user."""
    title = "Profile Not Found"


class JobNotFoundException(ServiceException):
    """Raised when a job id is not in the catalog."""
    title = "Job Not Found"


class InvalidUserIdException(ServiceException):
    """Raised when the user id header is missing or malformed."""
    title = "Invalid User"


class InputRequiredException(ServiceException):
    """Raised when required preference input is missing."""
    title = "Input Required"


class QuizIncompleteException(ServiceException):
    """Raised when a questionnaire submission is incomplete or out of range."""
    title = "Quiz Incomplete"


class TextGenerationException(ServiceException):
    """Raised when the LLM provider fails after retries."""
    title = "API Error"


class PersistenceException(ServiceException):
    """Raised when stored profile data cannot be loaded."""
    title = "Error Loading Data"


def _status_code_for(exc: ServiceException) -> int:
    if isinstance(exc, (ProfileNotFoundException, JobNotFoundException)):
        return 404
    if isinstance(exc, (InputRequiredException, QuizIncompleteException, InvalidUserIdException)):
        return 400
    if isinstance(exc, TextGenerationException):
        return 502
    if isinstance(exc, PersistenceException):
        return 503
    return 500


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = _status_code_for(exc)
    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Rejected request to {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "title": exc.title,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """Handle FastAPI HTTP exceptions with consistent format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
