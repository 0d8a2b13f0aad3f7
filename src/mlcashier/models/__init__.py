from .errors import APIError, APIErrorKind, ApiKeyMissingError, BaseUrlMissingError
from .result import Failure, Result, Success

__all__ = [
    "APIError",
    "APIErrorKind",
    "ApiKeyMissingError",
    "BaseUrlMissingError",
    "Failure",
    "Result",
    "Success",
]
