from fastapi import HTTPException, status


class ApplicationError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.detail
        )


class ValidationError(ApplicationError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid request"


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Resource not found"


class InternalServerError(ApplicationError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"


class StorageFault(InternalServerError):
    """Database unavailable or query failed. The cause is logged, never returned."""
    detail = "Database error"
