# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

import httpx
import pytest

from OploverzStream.Core import ExtractorBase, ExtractorManager, ExtractResult, Subtitle
from OploverzStream.Plugins.Oploverz import Oploverz


class FakeHost(ExtractorBase):
    """Stands in for a third-party video host."""
    name     = "FakeHost"
    main_url = "https://fakehost.test"

    def __init__(self):
        super().__init__()
        self.calls = []

    async def extract(self, url, referer=None):
        self.calls.append((url, referer))
        return ExtractResult(
            name      = self.name,
            url       = f"{url}/master.m3u8",
            referer   = referer,
            quality   = 360,
            subtitles = [Subtitle(name="Indonesia", url="https://fakehost.test/id.vtt")],
        )


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)


def html_handler(pages: dict):
    """Serves `pages` keyed by URL path; anything else is a 404."""
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path in pages:
            return httpx.Response(200, text=pages[request.url.path])
        return httpx.Response(404, text="not found")

    return handler


@pytest.fixture
def fake_host():
    return FakeHost()


@pytest.fixture
def plugin(fake_host):
    return Oploverz(ex_manager=ExtractorManager(extractors=[fake_host]))


@pytest.fixture
def serve(plugin):
    """serve({path: html}) routes the plugin's HTTP client to in-memory pages."""
    def _serve(pages: dict):
        plugin.httpx = mock_client(html_handler(pages))
        return plugin

    return _serve
