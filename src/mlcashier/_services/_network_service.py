import asyncio
from logging import getLogger
from typing import Any, Protocol, TypeVar

import httpx
from pydantic import TypeAdapter

from .._utils import RequestSpec, SupportsUrlRequest, is_valid_url
from .._utils.constants import HEADER_AUTHORIZATION, HEADER_CONTENT_TYPE
from ..models.errors import APIError, APIErrorKind
from ..models.result import Failure, Result, Success
from ._transport import (
    NETWORK_FAILURE_CODES,
    Transport,
    TransportError,
    TransportErrorCode,
    classify_transport_error,
)

T = TypeVar("T")


class SupportsLogging(Protocol):
    def debug(self, msg: str, *args: Any, **kwargs: Any) -> Any: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> Any: ...


class NetworkService(Protocol):
    async def execute(
        self, endpoint: SupportsUrlRequest, response_type: type[T]
    ) -> Result[T]: ...

    async def request(
        self, endpoint: SupportsUrlRequest, response_type: type[T]
    ) -> T: ...


class HttpNetworkService:
    """Executes a single HTTP call and classifies its outcome.

    Every call goes through the same linear steps: the endpoint is resolved
    and its headers checked, the request is sent once through the injected
    transport, and the response (or the transport failure) is turned into a
    :class:`Success` carrying the decoded body or a :class:`Failure` carrying
    exactly one :class:`APIError`. Nothing is retried.

    The service holds no per-call state, so one instance can be shared by
    concurrent callers.
    """

    def __init__(
        self, transport: Transport, *, logger: SupportsLogging | None = None
    ) -> None:
        self._transport = transport
        self._logger: SupportsLogging = logger or getLogger("mlcashier")

    async def request(self, endpoint: SupportsUrlRequest, response_type: type[T]) -> T:
        """Execute the endpoint and return the decoded body.

        Args:
            endpoint: Descriptor resolving to the request to send.
            response_type: Type the JSON body is validated into.

        Returns:
            The decoded response body.

        Raises:
            APIError: If the call fails for any reason.
        """
        result = await self.execute(endpoint, response_type)
        return result.unwrap()

    async def execute(
        self, endpoint: SupportsUrlRequest, response_type: type[T]
    ) -> Result[T]:
        """Execute the endpoint and return its classified outcome.

        Args:
            endpoint: Descriptor resolving to the request to send.
            response_type: Type the JSON body is validated into.

        Returns:
            Result: ``Success`` with the decoded body, or ``Failure`` with the
            :class:`APIError` describing what went wrong. Never raises, except
            when the calling task itself is cancelled.
        """
        spec_or_error = self._validate(endpoint)
        if isinstance(spec_or_error, APIError):
            return Failure(spec_or_error)
        spec = spec_or_error

        self._log("debug", f"Requesting URL: {spec.method} {spec.url}")

        try:
            response = await self._transport.send(spec)
            if isinstance(response, httpx.Response):
                await response.aread()
        except TransportError as e:
            return Failure(self._transport_failure(e.code, e))
        except httpx.RequestError as e:
            return Failure(self._transport_failure(classify_transport_error(e), e))
        except asyncio.CancelledError as e:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            error = TransportError(TransportErrorCode.CANCELLED, inner=e)
            return Failure(self._transport_failure(error.code, error))
        except Exception as e:
            self._log("error", f"Unknown Error: {e!r}")
            unknown = APIError(APIErrorKind.UNKNOWN_ERROR)
            unknown.__cause__ = e
            return Failure(unknown)

        return self._classify(spec, response, response_type)

    def _validate(self, endpoint: SupportsUrlRequest) -> RequestSpec | APIError:
        try:
            spec = endpoint.url_request
        except Exception as e:
            self._log("error", f"Invalid Request: endpoint could not be resolved ({e!r}).")
            return APIError(APIErrorKind.INVALID_REQUEST)

        if spec is None or not is_valid_url(spec.url):
            self._log("error", "Invalid Request: endpoint URL is missing or malformed.")
            return APIError(APIErrorKind.INVALID_REQUEST)

        headers = spec.headers or {}

        if HEADER_AUTHORIZATION not in headers:
            self._log("error", "Missing API Key: Authorization header is missing.")
            return APIError(APIErrorKind.MISSING_API_KEY)

        if HEADER_CONTENT_TYPE not in headers:
            self._log("error", "Invalid Request: Content-Type header is missing.")
            return APIError(APIErrorKind.INVALID_REQUEST)

        return spec

    def _classify(
        self, spec: RequestSpec, response: Any, response_type: type[T]
    ) -> Result[T]:
        if not isinstance(response, httpx.Response):
            self._log("error", "Invalid Response: response is not an HTTP response.")
            return Failure(APIError(APIErrorKind.INVALID_RESPONSE))

        status_code = response.status_code
        self._log("debug", f"Received HTTP Status Code: {status_code}")

        if 200 <= status_code <= 299:
            try:
                value = TypeAdapter(response_type).validate_json(
                    response.content, strict=True
                )
            except (ValueError, TypeError) as e:
                self._log("error", f"Data Decoding Error: {e}")
                return Failure(APIError.data_decoding_error(e))
            return Success(value)

        if status_code == 401:
            self._log("error", "Error: Unauthorized (401).")
            return Failure(APIError(APIErrorKind.UNAUTHORIZED))

        if status_code == 429:
            self._log("error", "Error: Rate Limit Exceeded (429).")
            return Failure(APIError(APIErrorKind.RATE_LIMIT_EXCEEDED))

        if status_code == 404:
            self._log("error", f"Error: Not Found (404). URL: {spec.url}")
            return Failure(APIError.unexpected_status_code(status_code))

        if 500 <= status_code <= 599:
            self._log("error", f"Error: Server Error ({status_code}).")
            return Failure(APIError(APIErrorKind.SERVER_ERROR))

        self._log("error", f"Error: Unexpected Status Code ({status_code}).")
        return Failure(APIError.unexpected_status_code(status_code))

    def _transport_failure(
        self, code: TransportErrorCode, error: BaseException
    ) -> APIError:
        if code in NETWORK_FAILURE_CODES:
            self._log("error", f"Network Failure: {error}")
            failure = APIError(APIErrorKind.NETWORK_FAILURE)
            failure.__cause__ = error
            return failure

        self._log("error", f"URL Session Error: {error}")
        return APIError.url_session_error(error)

    def _log(self, level: str, message: str) -> None:
        # logging must never change the outcome of a call
        try:
            getattr(self._logger, level)(message)
        except Exception:
            pass
