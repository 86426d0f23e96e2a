"""Test doubles for the browser page, the sheet sink and operator input."""

from typing import Any, Dict, List, Optional, Tuple, Union

PageContent = Dict[str, Any]


class FakeLocator:
    def __init__(self, count: int):
        self._count = count

    @property
    def first(self) -> "FakeLocator":
        return self

    async def count(self) -> int:
        return self._count


class FakePage:
    """
    Stand-in for a Playwright page.

    ``pages`` maps a URL to the content shown after navigating there: a dict
    with optional "text", "title", "final_url" and "selectors" keys, or a list
    of such dicts served one per navigation (the last one repeats).
    """

    def __init__(self, pages: Optional[Dict[str, Union[PageContent, List[PageContent]]]] = None):
        self.pages = pages or {}
        self.url = "about:blank"
        self.goto_calls: List[str] = []
        self.goto_errors: Dict[str, List[Exception]] = {}
        self.text_errors: List[Exception] = []
        self.screenshots: List[Tuple[str, bool]] = []
        self.screenshot_error: Optional[Exception] = None
        self._current: PageContent = {}

    def _next_content(self, url: str) -> PageContent:
        content = self.pages.get(url, {})
        if isinstance(content, list):
            return content.pop(0) if len(content) > 1 else content[0]
        return content

    async def goto(self, url: str, wait_until: Optional[str] = None):
        self.goto_calls.append(url)
        errors = self.goto_errors.get(url)
        if errors:
            raise errors.pop(0)
        self._current = self._next_content(url)
        self.url = self._current.get("final_url", url)

    async def title(self) -> str:
        return self._current.get("title", "")

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(1 if selector in self._current.get("selectors", ()) else 0)

    async def text_content(self, selector: str) -> Optional[str]:
        if self.text_errors:
            raise self.text_errors.pop(0)
        return self._current.get("text")

    async def screenshot(self, path: str, full_page: bool = False):
        if self.screenshot_error is not None:
            raise self.screenshot_error
        with open(path, "wb") as f:
            f.write(b"\x89PNG\r\n")
        self.screenshots.append((path, full_page))


class FakeSink:
    def __init__(self, error: Optional[Exception] = None):
        self.calls: List[Tuple[int, str, str]] = []
        self.error = error

    def write_metrics(self, row_index: int, activities: str, holdings_pnl: str) -> None:
        if self.error is not None:
            raise self.error
        self.calls.append((row_index, activities, holdings_pnl))


class ScriptedResumeSignal:
    """Resumes immediately and remembers why it was asked to wait."""

    def __init__(self):
        self.messages: List[str] = []

    async def wait(self, message: str) -> None:
        self.messages.append(message)


class RecordingSleep:
    """Async sleep replacement that records requested durations in seconds."""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
