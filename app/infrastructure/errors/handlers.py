from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.infrastructure.errors.base import ApplicationError
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)

NOT_FOUND_PAGE = Path(__file__).resolve().parents[2] / "views" / "404.html"


def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith("/api/")


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc, ApplicationError):
        return await application_error_handler(request, exc)

    if _is_api_request(request):
        detail = "Not found" if exc.status_code == status.HTTP_404_NOT_FOUND else exc.detail
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": detail},
            headers=exc.headers,
        )

    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return FileResponse(NOT_FOUND_PAGE, status_code=status.HTTP_404_NOT_FOUND)

    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    if _is_api_request(request):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )
    return PlainTextResponse("Internal server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
