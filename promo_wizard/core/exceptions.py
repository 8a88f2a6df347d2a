from typing import Any


class AppException(Exception):
    """Base application exception."""

    error_code: str = "APP_ERROR"
    message: str = "An application error occurred"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.__class__.message
        self.error_code = error_code or self.__class__.error_code
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(error_code={self.error_code!r}, message={self.message!r})"


class NotFoundError(AppException):
    """Resource not found."""

    error_code = "NOT_FOUND"
    message = "Resource not found"


class ValidationError(AppException):
    """Validation error."""

    error_code = "VALIDATION_ERROR"
    message = "Validation failed"


class CatalogFetchError(AppException):
    """Catalog page could not be fetched."""

    error_code = "CATALOG_FETCH_ERROR"
    message = "Failed to load products"

    def __init__(
        self,
        message: str | None = None,
        page_number: int | None = None,
        status: int | None = None,
    ) -> None:
        self.page_number = page_number
        self.status = status
        super().__init__(
            message=message,
            details={"page_number": page_number, "status": status},
        )


class SubmissionError(AppException):
    """Promotion submission was rejected or failed in transport."""

    error_code = "SUBMISSION_ERROR"
    message = "An unexpected error occurred."

    def __init__(
        self,
        message: str | None = None,
        status: int | None = None,
    ) -> None:
        self.status = status
        super().__init__(message=message, details={"status": status})


class ReentrantMutationError(AppException):
    """Store was mutated from inside one of its subscriber callbacks."""

    error_code = "REENTRANT_MUTATION"
    message = "Selection store cannot be mutated while notifying subscribers"
