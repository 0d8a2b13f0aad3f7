from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

USER_AGENT_PRODUCT = "MLCashier.Python.Sdk"


@lru_cache(maxsize=1)
def _package_version() -> str:
    try:
        return version("mlcashier")
    except PackageNotFoundError:
        return "0.0.0"


def user_agent_value() -> str:
    """User-Agent sent with every request, e.g. ``MLCashier.Python.Sdk/0.1.0``."""
    return f"{USER_AGENT_PRODUCT}/{_package_version()}"
