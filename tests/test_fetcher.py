"""Tests for rsspls.scanner.fetcher against a local aiohttp server."""

import asyncio

import pytest
from aiohttp import web
from aiohttp import test_utils

from rsspls.config import Settings
from rsspls.exceptions import TransportError
from rsspls.scanner.fetcher import AiohttpFetcher, FetchResponse


async def _page(request):
    return web.Response(text="<p>hello</p>", content_type="text/html")


async def _missing(request):
    raise web.HTTPNotFound()


async def _user_agent(request):
    return web.Response(text=request.headers.get("User-Agent", ""))


async def _slow(request):
    await asyncio.sleep(2)
    return web.Response(text="late")


def _app():
    app = web.Application()
    app.router.add_get("/page", _page)
    app.router.add_get("/missing", _missing)
    app.router.add_get("/ua", _user_agent)
    app.router.add_get("/slow", _slow)
    return app


async def _fetch(settings, path):
    async with test_utils.TestServer(_app()) as server:
        async with AiohttpFetcher(settings) as fetcher:
            return await fetcher.fetch(str(server.make_url(path)))


def test_fetch_success(settings):
    response = asyncio.run(_fetch(settings, "/page"))

    assert response.status == 200
    assert response.ok
    assert response.text == "<p>hello</p>"


def test_fetch_non_success_status_is_returned(settings):
    response = asyncio.run(_fetch(settings, "/missing"))

    assert response.status == 404
    assert response.reason == "Not Found"
    assert not response.ok


def test_fetch_sends_configured_user_agent():
    settings = Settings(_env_file=None, user_agent="rsspls-test/1.0")

    response = asyncio.run(_fetch(settings, "/ua"))

    assert response.text == "rsspls-test/1.0"


def test_fetch_timeout_raises_transport_error():
    settings = Settings(_env_file=None, request_timeout_seconds=0.2)

    with pytest.raises(TransportError) as excinfo:
        asyncio.run(_fetch(settings, "/slow"))

    assert excinfo.value.url.endswith("/slow")


def test_fetch_connection_error_raises_transport_error(settings):
    async def fetch_closed_port():
        async with AiohttpFetcher(settings) as fetcher:
            return await fetcher.fetch("http://127.0.0.1:1/")

    with pytest.raises(TransportError) as excinfo:
        asyncio.run(fetch_closed_port())

    assert excinfo.value.status_code is None


def test_fetch_requires_context_manager(settings):
    with pytest.raises(RuntimeError):
        asyncio.run(AiohttpFetcher(settings).fetch("http://127.0.0.1:1/"))


@pytest.mark.parametrize("status, ok", [(200, True), (204, True), (301, False), (404, False), (500, False)])
def test_fetch_response_ok(status, ok):
    assert FetchResponse(url="https://example.com/", status=status).ok is ok
