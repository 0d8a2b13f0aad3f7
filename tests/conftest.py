import sys
from pathlib import Path

import pytest

from mlcashier import Config, Endpoint

# Ensure local source package (src/mlcashier) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("MLCASHIER_URL", raising=False)
    monkeypatch.delenv("MLCASHIER_API_KEY", raising=False)
    monkeypatch.delenv("MLCASHIER_TIMEOUT", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com/v1"


@pytest.fixture
def api_key() -> str:
    return "test-api-key"


@pytest.fixture
def config(base_url: str, api_key: str) -> Config:
    return Config(base_url=base_url, api_key=api_key)


@pytest.fixture
def endpoint(base_url: str, api_key: str) -> Endpoint:
    """A valid endpoint carrying both required headers."""
    return Endpoint(
        base_url=base_url,
        path="/items/1",
        headers={
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        },
    )
