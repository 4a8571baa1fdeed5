from collections.abc import Callable

import httpx
import pytest

from cmore_search.client import Client
from cmore_search.settings import get_settings
from tests.helpers import BASE_URL


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("BASE_URL", "APP_NAME", "TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(f"CMORE_SEARCH_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_client() -> Callable[..., Client]:
    def factory(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> Client:
        kwargs.setdefault("base_url", BASE_URL)
        return Client(http_client=httpx.Client(transport=httpx.MockTransport(handler)), **kwargs)

    return factory
