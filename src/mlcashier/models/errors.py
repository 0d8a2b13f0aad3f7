from dataclasses import dataclass
from enum import Enum


class APIErrorKind(str, Enum):
    """Closed set of failure kinds a network call can end in."""

    URL_SESSION_ERROR = "url_session_error"
    DATA_DECODING_ERROR = "data_decoding_error"
    INVALID_RESPONSE = "invalid_response"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    MISSING_API_KEY = "missing_api_key"
    INVALID_REQUEST = "invalid_request"
    UNEXPECTED_STATUS_CODE = "unexpected_status_code"
    SERVER_ERROR = "server_error"
    NETWORK_FAILURE = "network_failure"
    UNKNOWN_ERROR = "unknown_error"


_MESSAGES: dict[APIErrorKind, str] = {
    APIErrorKind.URL_SESSION_ERROR: "Transport error",
    APIErrorKind.DATA_DECODING_ERROR: "Response body could not be decoded",
    APIErrorKind.INVALID_RESPONSE: "Response is not an HTTP response",
    APIErrorKind.UNAUTHORIZED: "Unauthorized (401)",
    APIErrorKind.RATE_LIMIT_EXCEEDED: "Rate limit exceeded (429)",
    APIErrorKind.MISSING_API_KEY: "Authorization header is missing",
    APIErrorKind.INVALID_REQUEST: "Invalid request",
    APIErrorKind.UNEXPECTED_STATUS_CODE: "Unexpected status code",
    APIErrorKind.SERVER_ERROR: "Server error",
    APIErrorKind.NETWORK_FAILURE: "Network failure",
    APIErrorKind.UNKNOWN_ERROR: "Unknown error",
}


@dataclass(eq=False)
class APIError(Exception):
    """A classified failure of a single network call.

    Only ``URL_SESSION_ERROR`` and ``DATA_DECODING_ERROR`` carry a ``cause``;
    only ``UNEXPECTED_STATUS_CODE`` carries a ``status_code``.
    """

    kind: APIErrorKind
    cause: BaseException | None = None
    status_code: int | None = None

    def __post_init__(self) -> None:
        super().__init__(str(self))
        if self.cause is not None:
            self.__cause__ = self.cause

    def __str__(self) -> str:
        message = _MESSAGES[self.kind]
        if self.status_code is not None:
            message = f"{message} ({self.status_code})"
        if self.cause is not None:
            message = f"{message}: {self.cause}"
        return message

    @classmethod
    def url_session_error(cls, cause: BaseException) -> "APIError":
        return cls(APIErrorKind.URL_SESSION_ERROR, cause=cause)

    @classmethod
    def data_decoding_error(cls, cause: BaseException) -> "APIError":
        return cls(APIErrorKind.DATA_DECODING_ERROR, cause=cause)

    @classmethod
    def unexpected_status_code(cls, status_code: int) -> "APIError":
        return cls(APIErrorKind.UNEXPECTED_STATUS_CODE, status_code=status_code)


class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message="Base URL is required. Pass base_url or set the MLCASHIER_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)


class ApiKeyMissingError(Exception):
    def __init__(
        self,
        message="API key is required. Pass api_key or set the MLCASHIER_API_KEY environment variable.",
    ):
        self.message = message
        super().__init__(self.message)
