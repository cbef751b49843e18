import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from newsapi_client.client import NewsAPI
from newsapi_client.exceptions import BadRequest, UrlParsing
from newsapi_client.models import Country, Endpoint, NewsAPIResponse
from newsapi_client.transports import asynchronous, blocking, browser


def test_default_url():
    assert NewsAPI("key").prepare_url() == "https://newsapi.org/v2/top-headlines?country=us"


@pytest.mark.parametrize("endpoint", list(Endpoint))
@pytest.mark.parametrize("country", list(Country))
def test_url_shape_for_every_variant(endpoint, country):
    api = NewsAPI("key").set_endpoint(endpoint).set_country(country)
    assert api.prepare_url() == f"https://newsapi.org/v2/{endpoint}?country={country}"


def test_setters_chain_and_mutate():
    api = NewsAPI("key")
    assert api.set_country(Country.FR) is api
    assert api.country is Country.FR
    assert api.endpoint is Endpoint.TOP_HEADLINES


def test_api_key_not_in_url():
    assert "secret" not in NewsAPI("secret").prepare_url()


def test_base_url_query_is_replaced():
    api = NewsAPI("key", base_url="https://example.com/v2/?apiKey=x&page=2")
    assert api.prepare_url() == "https://example.com/v2/top-headlines?country=us"


@pytest.mark.parametrize("base_url", ["not a url", "mailto:news@example.com", "https://example.com:port/v2"])
def test_bad_base_url(base_url):
    with pytest.raises(UrlParsing):
        NewsAPI("key", base_url=base_url).prepare_url()


def test_fetch_uses_blocking_transport(mocker):
    ok = NewsAPIResponse(status="ok")
    transport = mocker.patch.object(blocking, "fetch_json", return_value=ok)

    result = NewsAPI("key", timeout=5).set_country(Country.FR).fetch()

    assert result is ok
    transport.assert_called_once_with(
        "https://newsapi.org/v2/top-headlines?country=fr", "key", session=None, timeout=5
    )


def test_fetch_classifies_error(mocker):
    mocker.patch.object(blocking, "fetch_json", return_value=NewsAPIResponse(status="error", code="apiKeyDisabled"))
    with pytest.raises(BadRequest) as excinfo:
        NewsAPI("key").fetch()
    assert excinfo.value.reason == "Your API key has been disabled"


@pytest.mark.asyncio
async def test_fetch_async_uses_async_transport(mocker):
    ok = NewsAPIResponse(status="ok")
    transport = mocker.patch.object(asynchronous, "fetch_json", mocker.AsyncMock(return_value=ok))

    assert await NewsAPI("key").fetch_async() is ok
    transport.assert_awaited_once_with(
        "https://newsapi.org/v2/top-headlines?country=us", "key", session=None, timeout=None
    )


@pytest.mark.asyncio
async def test_all_transports_classify_the_same(mocker):
    error = NewsAPIResponse(status="error", code="somethingElse")
    mocker.patch.object(blocking, "fetch_json", return_value=error)
    mocker.patch.object(asynchronous, "fetch_json", mocker.AsyncMock(return_value=error))
    mocker.patch.object(browser, "fetch_json", mocker.AsyncMock(return_value=error))
    api = NewsAPI("key")

    reasons = []
    with pytest.raises(BadRequest) as excinfo:
        api.fetch()
    reasons.append(excinfo.value.reason)
    with pytest.raises(BadRequest) as excinfo:
        await api.fetch_async()
    reasons.append(excinfo.value.reason)
    with pytest.raises(BadRequest) as excinfo:
        await api.fetch_web()
    reasons.append(excinfo.value.reason)

    assert reasons == ["Unknown error"] * 3


def test_from_env(mocker, monkeypatch):
    mocker.patch("newsapi_client.config.load_dotenv")
    monkeypatch.setenv("NEWSAPI_KEY", "env-key")
    monkeypatch.setenv("NEWSAPI_TIMEOUT", "3")
    monkeypatch.setenv("NEWSAPI_BROWSER_WS", "ws://localhost:9222")
    monkeypatch.delenv("NEWSAPI_BASE_URL", raising=False)

    api = NewsAPI.from_env()

    assert api.api_key == "env-key"
    assert api.timeout == 3.0
    assert api.browser_ws == "ws://localhost:9222"
    assert api.prepare_url() == "https://newsapi.org/v2/top-headlines?country=us"
