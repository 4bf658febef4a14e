"""Stand-ins for the Playwright objects and rendering session."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from tests.helpers.crawler_imports import LoadResult

PageSpec = Union[Tuple[int, Sequence[str]], Exception]


class FakeSession:
    """Serves a static page graph: url -> (status, links) or an exception."""

    def __init__(self, site: Dict[str, PageSpec]) -> None:
        self.site = site
        self.loads: List[str] = []
        self.entered = 0
        self.exited = 0

    def __enter__(self) -> "FakeSession":
        self.entered += 1
        return self

    def __exit__(self, *exc_info) -> None:
        self.exited += 1

    def load(self, url: str) -> LoadResult:
        self.loads.append(url)
        spec = self.site.get(url, (404, ()))
        if isinstance(spec, Exception):
            raise spec
        status, links = spec
        return LoadResult(url=url, status=status, links=list(links))


class FakePage:
    """Minimal Playwright page: replays responses and answers DOM queries."""

    def __init__(
        self,
        url: str = "https://example.com/",
        responses: Sequence[Tuple[str, int]] = (),
        hrefs: Optional[Sequence[str]] = None,
        html: str = "",
        goto_error: Optional[Exception] = None,
    ) -> None:
        self.url = url
        self.responses = list(responses)
        self.hrefs = hrefs
        self.html = html
        self.goto_error = goto_error
        self.handlers: Dict[str, List[Callable]] = {}
        self.goto_calls: List[dict] = []
        self.eval_calls = 0
        self.closed = False

    def on(self, event: str, handler: Callable) -> None:
        self.handlers.setdefault(event, []).append(handler)

    def goto(self, url: str, **kwargs) -> None:
        self.goto_calls.append({"url": url, **kwargs})
        for response_url, status in self.responses:
            for handler in self.handlers.get("response", []):
                handler(SimpleNamespace(url=response_url, status=status))
        if self.goto_error is not None:
            raise self.goto_error

    def eval_on_selector_all(self, selector: str, expression: str):
        self.eval_calls += 1
        if self.hrefs is None:
            raise RuntimeError("Execution context was destroyed")
        return list(self.hrefs)

    def content(self) -> str:
        return self.html

    def close(self) -> None:
        self.closed = True


class FakeContext:
    def __init__(self, page: FakePage) -> None:
        self.page = page

    def new_page(self) -> FakePage:
        return self.page
