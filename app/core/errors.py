import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.services.analytics.periods import InvalidMonthError

logger = logging.getLogger(__name__)


class AnalyticsError(Exception):
    """A request failed; rendered as 500 with the message and the cause."""

    def __init__(self, message: str, error: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.error = error


def describe_error(error: Optional[BaseException]) -> Dict[str, Any]:
    """JSON-safe description of the exception behind a failed request."""
    if error is None:
        return {}
    return {"type": error.__class__.__name__, "detail": str(error)}


async def analytics_error_handler(request: Request, exc: AnalyticsError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": exc.message, "error": describe_error(exc.error)},
    )


async def invalid_month_handler(request: Request, exc: InvalidMonthError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error payload handlers to the application."""
    app.add_exception_handler(AnalyticsError, analytics_error_handler)
    app.add_exception_handler(InvalidMonthError, invalid_month_handler)
