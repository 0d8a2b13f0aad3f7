from ._network_service import HttpNetworkService, NetworkService, SupportsLogging
from ._transport import (
    NETWORK_FAILURE_CODES,
    HttpxTransport,
    Transport,
    TransportError,
    TransportErrorCode,
    classify_transport_error,
)

__all__ = [
    "HttpNetworkService",
    "HttpxTransport",
    "NETWORK_FAILURE_CODES",
    "NetworkService",
    "SupportsLogging",
    "Transport",
    "TransportError",
    "TransportErrorCode",
    "classify_transport_error",
]
