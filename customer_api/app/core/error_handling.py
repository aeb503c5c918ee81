"""
Exception handlers mapping domain errors onto HTTP responses.

``setup_error_handling`` registers one handler per error kind:

* request validation failures -> 400 with one entry per failing field;
* ``CustomerNotFoundError`` -> 404;
* ``CustomerAlreadyExistsError`` and ``DuplicateEmailError`` -> 409;
* anything else -> 500, logged with its traceback.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from customer_api.app.schemas.customer import CustomerDTO
from .exceptions import CustomerAlreadyExistsError, CustomerNotFoundError, DuplicateEmailError

logger = logging.getLogger(__name__)


def _validation_details(exc: RequestValidationError) -> List[Dict[str, Any]]:
    details = []
    for error in exc.errors():
        # Drop the leading "body"/"path" segment so clients see the field name.
        loc = [str(part) for part in error.get("loc", ())][1:]
        field = ".".join(loc) or None
        ctx_error = (error.get("ctx") or {}).get("error")
        if ctx_error:
            message = str(ctx_error)
        elif error.get("type") == "missing" and field:
            message = CustomerDTO.mandatory_message(field) or error.get("msg")
        else:
            message = error.get("msg", "Invalid value")
        details.append({"field": field, "message": message})
    return details


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = _validation_details(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": details})


async def not_found_handler(request: Request, exc: CustomerNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def conflict_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def setup_error_handling(app: FastAPI) -> None:
    """Register the exception handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(CustomerNotFoundError, not_found_handler)
    app.add_exception_handler(CustomerAlreadyExistsError, conflict_handler)
    app.add_exception_handler(DuplicateEmailError, conflict_handler)
    app.add_exception_handler(Exception, general_exception_handler)
