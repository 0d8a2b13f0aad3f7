import errno
import socket
from dataclasses import dataclass
from enum import Enum
from logging import getLogger
from typing import Any, Protocol

import httpx

from .._utils import RequestSpec, get_httpx_client_kwargs

_NOT_CONNECTED_ERRNOS = frozenset({errno.ENETUNREACH, errno.ENETDOWN, errno.EHOSTUNREACH})
_CONNECTION_LOST_ERRNOS = frozenset({errno.ECONNRESET, errno.EPIPE, errno.ECONNABORTED})


class TransportErrorCode(str, Enum):
    """Cause of a transport failure that happened before any response arrived."""

    NOT_CONNECTED_TO_INTERNET = "not_connected_to_internet"
    NETWORK_CONNECTION_LOST = "network_connection_lost"
    TIMED_OUT = "timed_out"
    CANNOT_FIND_HOST = "cannot_find_host"
    CANNOT_CONNECT_TO_HOST = "cannot_connect_to_host"
    BAD_SERVER_RESPONSE = "bad_server_response"
    UNSUPPORTED_URL = "unsupported_url"
    PROXY_ERROR = "proxy_error"
    TOO_MANY_REDIRECTS = "too_many_redirects"
    CANNOT_DECODE_CONTENT_DATA = "cannot_decode_content_data"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


NETWORK_FAILURE_CODES = frozenset(
    {
        TransportErrorCode.NOT_CONNECTED_TO_INTERNET,
        TransportErrorCode.NETWORK_CONNECTION_LOST,
    }
)


@dataclass(eq=False)
class TransportError(Exception):
    code: TransportErrorCode
    inner: BaseException | None = None

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.inner is None:
            return self.code.value
        return f"{self.code.value}: {self.inner}"


class Transport(Protocol):
    async def send(self, request: RequestSpec) -> Any: ...


def _os_error(exc: BaseException) -> OSError | None:
    """Find the OSError an httpx exception was raised from, if any."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, OSError):
            return current
        current = current.__cause__ or current.__context__
    return None


def classify_transport_error(exc: httpx.RequestError) -> TransportErrorCode:
    """Map an httpx request exception to a :class:`TransportErrorCode`.

    Connect errors are refined by the operating-system error they wrap:
    an unreachable network means no connectivity, a DNS failure means the
    host could not be found and a refused connection means the host is down.
    """
    if isinstance(exc, httpx.TooManyRedirects):
        return TransportErrorCode.TOO_MANY_REDIRECTS
    if isinstance(exc, httpx.DecodingError):
        return TransportErrorCode.CANNOT_DECODE_CONTENT_DATA
    if isinstance(exc, httpx.TimeoutException):
        return TransportErrorCode.TIMED_OUT
    if isinstance(exc, httpx.ProxyError):
        return TransportErrorCode.PROXY_ERROR
    if isinstance(exc, httpx.UnsupportedProtocol):
        return TransportErrorCode.UNSUPPORTED_URL
    if isinstance(exc, httpx.RemoteProtocolError):
        return TransportErrorCode.BAD_SERVER_RESPONSE

    os_error = _os_error(exc)

    if isinstance(exc, httpx.ConnectError):
        if isinstance(os_error, socket.gaierror):
            return TransportErrorCode.CANNOT_FIND_HOST
        if os_error is not None and os_error.errno == errno.ECONNREFUSED:
            return TransportErrorCode.CANNOT_CONNECT_TO_HOST
        return TransportErrorCode.NOT_CONNECTED_TO_INTERNET

    if isinstance(exc, (httpx.ReadError, httpx.WriteError, httpx.CloseError)):
        return TransportErrorCode.NETWORK_CONNECTION_LOST

    if os_error is not None:
        if os_error.errno in _NOT_CONNECTED_ERRNOS:
            return TransportErrorCode.NOT_CONNECTED_TO_INTERNET
        if os_error.errno in _CONNECTION_LOST_ERRNOS:
            return TransportErrorCode.NETWORK_CONNECTION_LOST

    return TransportErrorCode.UNKNOWN


class HttpxTransport:
    """Transport that sends requests with an ``httpx.AsyncClient``.

    One client is owned per transport instance; close it with :meth:`aclose`
    or use the transport as an async context manager.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._logger = getLogger("mlcashier")
        self._client = client or httpx.AsyncClient(**get_httpx_client_kwargs(timeout))

    async def send(self, request: RequestSpec) -> httpx.Response:
        try:
            return await self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.content,
            )
        except httpx.RequestError as e:
            code = classify_transport_error(e)
            self._logger.debug(f"Transport failure ({code.value}): {e!r}")
            raise TransportError(code, inner=e) from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
