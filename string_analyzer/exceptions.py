from fastapi import status


class ServiceError(Exception):
    """Base error for request failures; carries the HTTP status it maps to."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidTypeError(ValidationError):
    """Field is present but has the wrong JSON type"""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT


class FilterConflictError(ConflictError):
    """Two natural language triggers set the same filter to different values"""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
