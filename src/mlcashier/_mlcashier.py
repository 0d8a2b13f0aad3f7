from logging import getLogger
from os import environ as env
from typing import Any

from dotenv import load_dotenv

from ._config import Config
from ._services import HttpNetworkService, HttpxTransport, Transport
from ._utils import Endpoint, setup_logging, user_agent_value
from ._utils.constants import (
    APPLICATION_JSON,
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_TIMEOUT,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
)
from .models.errors import ApiKeyMissingError, BaseUrlMissingError

load_dotenv()


class MLCashier:
    """Entry point for talking to the ML cashier API.

    Configuration is taken from the arguments first and the environment
    (``MLCASHIER_URL``, ``MLCASHIER_API_KEY``, ``MLCASHIER_TIMEOUT``) second.

    Examples:
        ```python
        async with MLCashier() as client:
            endpoint = client.endpoint("/products", params={"top": 10})
            result = await client.network.execute(endpoint, list[Product])
        ```
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        debug: bool = False,
        transport: Transport | None = None,
    ) -> None:
        base_url_value = base_url or env.get(ENV_BASE_URL)
        api_key_value = api_key or env.get(ENV_API_KEY)
        timeout_value = timeout if timeout is not None else env.get(ENV_TIMEOUT)

        if not base_url_value:
            raise BaseUrlMissingError()
        if not api_key_value:
            raise ApiKeyMissingError()

        config_kwargs: dict[str, Any] = {
            "base_url": base_url_value,
            "api_key": api_key_value,
            "debug": debug,
        }
        if timeout_value is not None:
            config_kwargs["timeout"] = timeout_value
        self._config = Config(**config_kwargs)

        setup_logging(self._config.debug)
        log = getLogger("mlcashier")
        log.debug(
            f"CONFIG: base_url={self._config.base_url} timeout={self._config.timeout}"
        )

        self._transport = transport or HttpxTransport(timeout=self._config.timeout)
        self._network = HttpNetworkService(self._transport, logger=log)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def network(self) -> HttpNetworkService:
        return self._network

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_ACCEPT: APPLICATION_JSON,
            HEADER_CONTENT_TYPE: APPLICATION_JSON,
            HEADER_USER_AGENT: user_agent_value(),
            **self.auth_headers,
        }

    @property
    def auth_headers(self) -> dict[str, str]:
        return {HEADER_AUTHORIZATION: f"Bearer {self._config.api_key}"}

    def endpoint(
        self,
        path: str,
        *,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        json: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Endpoint:
        """Build an endpoint relative to the configured base URL.

        Args:
            path: Path appended to the base URL.
            method: HTTP method.
            params: Query parameters.
            json: JSON-serializable request body.
            headers: Extra headers, applied over the default ones.

        Returns:
            Endpoint: An endpoint carrying the API key and JSON content headers.
        """
        return Endpoint(
            base_url=self._config.base_url,
            path=path,
            method=method,
            headers={**self.default_headers, **(headers or {})},
            params=params or {},
            json=json,
        )

    async def aclose(self) -> None:
        aclose = getattr(self._transport, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self) -> "MLCashier":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
