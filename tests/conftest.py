import pytest

from core.config import AppSettings
from core.domain.errors import PageFetchError, TxtRecordNotFound
from core.domain.models import PageMetadata


@pytest.fixture
def settings(monkeypatch):
    """Settings independent of the developer's environment and .env file."""
    for name in ("PORT", "FRAME_TITLE"):
        monkeypatch.delenv(name, raising=False)
    return AppSettings(_env_file=None, default_title="Default Title")


class FakeLookup:
    """TXT lookup backed by a dict of record name -> value (or exception)."""

    def __init__(self, records=None):
        self.records = dict(records or {})
        self.calls = []

    def __call__(self, record_name, settings):
        self.calls.append(record_name)
        value = self.records.get(record_name)
        if value is None:
            raise TxtRecordNotFound(record_name + ".")
        if isinstance(value, Exception):
            raise value
        return value


class FakeFetch:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def __call__(self, url, settings):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def make_lookup():
    return FakeLookup


@pytest.fixture
def make_fetch():
    return FakeFetch


@pytest.fixture
def failing_fetch():
    return FakeFetch(error=PageFetchError("failed to fetch page: connection refused"))


@pytest.fixture
def page_fetch():
    return FakeFetch(
        result=PageMetadata(title="Scraped Title", favicon="https://target.example/scraped.ico")
    )
