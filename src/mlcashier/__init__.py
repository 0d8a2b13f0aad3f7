from ._config import Config
from ._mlcashier import MLCashier
from ._services import (
    HttpNetworkService,
    HttpxTransport,
    NetworkService,
    Transport,
    TransportError,
    TransportErrorCode,
)
from ._utils import Endpoint, RequestSpec
from .models import (
    APIError,
    APIErrorKind,
    ApiKeyMissingError,
    BaseUrlMissingError,
    Failure,
    Result,
    Success,
)

__all__ = [
    "APIError",
    "APIErrorKind",
    "ApiKeyMissingError",
    "BaseUrlMissingError",
    "Config",
    "Endpoint",
    "Failure",
    "HttpNetworkService",
    "HttpxTransport",
    "MLCashier",
    "NetworkService",
    "RequestSpec",
    "Result",
    "Success",
    "Transport",
    "TransportError",
    "TransportErrorCode",
]
