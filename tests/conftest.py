import pytest
import requests


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeWeb:
    """Canned pages keyed by URL; anything else fails like an unreachable host."""

    def __init__(self):
        self.pages: dict[str, FakeResponse | Exception] = {}
        self.calls: list[dict] = []
        self.max_redirects: list[int] = []

    def serve(self, url: str, html: str, status_code: int = 200) -> None:
        self.pages[url] = FakeResponse(html, status_code)

    def fail(self, url: str, error: Exception) -> None:
        self.pages[url] = error

    @property
    def requested_urls(self) -> list[str]:
        return [call["url"] for call in self.calls]


@pytest.fixture
def fake_web(monkeypatch) -> FakeWeb:
    web = FakeWeb()

    class StubSession:
        def __init__(self):
            self.max_redirects = 30

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

        def get(self, url, headers=None, timeout=None, allow_redirects=None):
            web.max_redirects.append(self.max_redirects)
            web.calls.append({
                "url": url,
                "headers": headers,
                "timeout": timeout,
                "allow_redirects": allow_redirects,
            })
            page = web.pages.get(url)
            if page is None:
                raise requests.ConnectionError(f"cannot reach {url}")
            if isinstance(page, Exception):
                raise page
            return page

    monkeypatch.setattr("partsearch.scraper.requests.Session", StubSession)
    return web
