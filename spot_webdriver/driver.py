"""
Driver handle for one simulated device.

Wraps a Playwright ``Page`` so page objects and the session only deal with
paths, query parameters and selectors. Timeouts are in milliseconds, as in
Playwright, and ``None`` means Playwright's default.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from playwright.sync_api import Page

from .logging_config import get_logger

logger = get_logger(__name__)


def encode_query(query_params: Optional[Mapping[str, Any]]) -> str:
    """Encode query parameters, keeping insertion order.

    Booleans become ``true``/``false`` the way the web apps read them and
    ``None`` values are dropped.
    """
    if not query_params:
        return ""
    pairs = []
    for key, value in query_params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        pairs.append((key, str(value)))
    return urlencode(pairs)


class Driver:
    """Browser handle used by exactly one participant."""

    def __init__(self, page: Page, base_url: str):
        self.page = page
        self.base_url = base_url.rstrip("/")

    def build_url(self, path: str, query_params: Optional[Mapping[str, Any]] = None) -> str:
        if not path.startswith("/"):
            path = "/" + path
        query = encode_query(query_params)
        return f"{self.base_url}{path}?{query}" if query else f"{self.base_url}{path}"

    def goto(
        self,
        path: str,
        query_params: Optional[Mapping[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> None:
        url = self.build_url(path, query_params)
        logger.debug("Navigating to %s", url, extra={"url": url})
        self.page.goto(url, timeout=timeout)

    def execute_async(self, script: str, *args: Any) -> Any:
        """Run an in-page function that reports completion through ``done``.

        ``script`` is JavaScript function source whose first parameter is
        the ``done`` callback; remaining parameters receive ``args``. The
        call blocks until ``done`` is invoked and returns its argument.
        """
        wrapper = f"(args) => new Promise(done => ({script})(done, ...args))"
        return self.page.evaluate(wrapper, list(args))

    def wait_for_visible(self, selector: str, timeout: Optional[int] = None) -> None:
        """Block until ``selector`` is visible; Playwright's TimeoutError propagates."""
        self.page.wait_for_selector(selector, state="visible", timeout=timeout)

    def fill(self, selector: str, value: str) -> None:
        self.page.fill(selector, value)

    def press(self, selector: str, key: str) -> None:
        self.page.press(selector, key)

    def click(self, selector: str) -> None:
        self.page.click(selector)

    def text_of(self, selector: str) -> str:
        return (self.page.text_content(selector) or "").strip()
