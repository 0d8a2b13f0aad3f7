import os
import ssl
from typing import Any

import httpx

from .constants import DEFAULT_TIMEOUT


def expand_path(path: str | None) -> str | None:
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context() -> ssl.SSLContext:
    # Try truststore first (system certificates)
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
        requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
        ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def get_httpx_client_kwargs(timeout: float | None = None) -> dict[str, Any]:
    """Default keyword arguments for building an httpx client.

    Args:
        timeout: Request timeout in seconds. Defaults to ``DEFAULT_TIMEOUT``.

    Returns:
        dict: SSL context, timeout and redirect settings.
    """
    return {
        "verify": create_ssl_context(),
        "timeout": httpx.Timeout(timeout if timeout is not None else DEFAULT_TIMEOUT),
        "follow_redirects": True,
    }
