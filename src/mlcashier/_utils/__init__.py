from ._endpoint import Endpoint, SupportsUrlRequest, is_valid_url
from ._logs import setup_logging
from ._request_spec import RequestSpec
from ._ssl_context import get_httpx_client_kwargs
from ._user_agent import user_agent_value

__all__ = [
    "Endpoint",
    "RequestSpec",
    "SupportsUrlRequest",
    "get_httpx_client_kwargs",
    "is_valid_url",
    "setup_logging",
    "user_agent_value",
]
