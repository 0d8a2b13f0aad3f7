import json
from dataclasses import dataclass, field
from logging import getLogger
from typing import Any, Protocol

import httpx

from ._request_spec import RequestSpec

logger = getLogger("mlcashier")

_SUPPORTED_SCHEMES = ("http", "https")


class SupportsUrlRequest(Protocol):
    """Anything the network service can execute."""

    @property
    def url_request(self) -> RequestSpec | None: ...


def is_valid_url(url: str) -> bool:
    """Return True if ``url`` parses as an absolute http(s) URL with a host."""
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError):
        return False
    return parsed.scheme in _SUPPORTED_SCHEMES and bool(parsed.host)


@dataclass
class Endpoint:
    """Describes a single API call relative to a base URL.

    The endpoint is resolved lazily through :attr:`url_request`, which yields
    ``None`` when the description cannot be turned into a well-formed request
    (malformed URL, unsupported scheme or a body that is not JSON-serializable).

    Examples:
        ```python
        endpoint = Endpoint(
            base_url="https://api.example.com/v1",
            path="/predictions",
            method="POST",
            headers={"Authorization": "Bearer <key>", "Content-Type": "application/json"},
            json={"image": "..."},
        )
        spec = endpoint.url_request
        ```
    """

    base_url: str
    path: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)
    json: Any | None = None

    @property
    def url(self) -> str:
        if not self.path:
            return self.base_url
        base, has_query, query = self.base_url.partition("?")
        joined = f"{base.rstrip('/')}/{self.path.lstrip('/')}"
        if not has_query:
            return joined
        separator = "&" if "?" in joined else "?"
        return f"{joined}{separator}{query}"

    @property
    def url_request(self) -> RequestSpec | None:
        if not is_valid_url(self.url):
            logger.debug(f"Endpoint URL is not valid: {self.url!r}")
            return None

        try:
            url = httpx.URL(self.url)
            if self.params:
                url = url.copy_merge_params(self.params)
        except (httpx.InvalidURL, TypeError):
            logger.debug(f"Endpoint query parameters are not valid: {self.params!r}")
            return None

        content: bytes | None = None
        if self.json is not None:
            try:
                content = json.dumps(self.json).encode("utf-8")
            except (TypeError, ValueError):
                logger.debug("Endpoint body is not JSON serializable.")
                return None

        return RequestSpec(
            method=self.method.upper(),
            url=str(url),
            headers=dict(self.headers),
            content=content,
        )
