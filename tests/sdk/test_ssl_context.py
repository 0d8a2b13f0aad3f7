import ssl

import httpx
import pytest

from mlcashier._utils._ssl_context import (
    create_ssl_context,
    expand_path,
    get_httpx_client_kwargs,
)


class TestExpandPath:
    def test_empty_values_pass_through(self):
        assert expand_path(None) is None
        assert expand_path("") == ""

    def test_expands_environment_variables(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MLCASHIER_CERTS", "/etc/certs")

        assert expand_path("$MLCASHIER_CERTS/ca.pem") == "/etc/certs/ca.pem"

    def test_expands_home_directory(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HOME", "/home/cashier")

        assert expand_path("~/ca.pem") == "/home/cashier/ca.pem"


class TestHttpxClientKwargs:
    def test_ssl_context(self):
        assert isinstance(create_ssl_context(), ssl.SSLContext)

    def test_defaults(self):
        kwargs = get_httpx_client_kwargs()

        assert isinstance(kwargs["verify"], ssl.SSLContext)
        assert kwargs["timeout"] == httpx.Timeout(30.0)
        assert kwargs["follow_redirects"] is True

    def test_custom_timeout(self):
        assert get_httpx_client_kwargs(5)["timeout"] == httpx.Timeout(5)
