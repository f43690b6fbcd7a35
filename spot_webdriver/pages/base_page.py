"""Shared behaviour for all page objects."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..driver import Driver


class BasePage:
    """A page reachable at ``PATH`` whose root element matches ``ROOT``."""

    PATH = "/"
    ROOT = "body"

    def __init__(self, driver: Driver):
        self.driver = driver

    def visit(
        self,
        query_params: Optional[Mapping[str, Any]] = None,
        max_wait: Optional[int] = None,
    ) -> None:
        """Load the page and wait for its root element."""
        self.driver.goto(self.PATH, query_params, timeout=max_wait)
        self.wait_for_visible(max_wait)

    def wait_for_visible(self, timeout: Optional[int] = None) -> None:
        self.driver.wait_for_visible(self.ROOT, timeout)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{type(self).__name__}({self.driver.base_url}{self.PATH})"
