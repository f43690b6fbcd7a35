"""Errors raised before a TV / Remote session ever reaches a browser."""

from __future__ import annotations


class SpotError(Exception):
    """A session could not be set up.

    ``code`` is stable and meant for scripts (``invalid_config``);
    ``message`` says which setting is wrong and why.
    """

    def __init__(self, code: str, message: str):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


__all__ = ["SpotError"]
