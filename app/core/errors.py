# app/core/errors.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class TourBoardError(Exception):
    """Base class for failures surfaced by the tours services."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFound(TourBoardError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ValidationFailed(TourBoardError):
    status_code = 422
    default_detail = "Validation failed"


class PermissionDenied(TourBoardError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not authorized"


class StoreUnavailable(TourBoardError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Store unavailable"


async def tour_board_error_handler(request: Request, exc: TourBoardError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TourBoardError, tour_board_error_handler)
