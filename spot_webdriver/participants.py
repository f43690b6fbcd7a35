"""
Simulated devices taking part in a session.

Each participant owns one driver handle and creates its page objects on
first use.
"""

from __future__ import annotations

from typing import Dict

from .driver import Driver
from .pages import CalendarPage, JoinCodePage, MeetingPage, RemoteControlPage
from .pages.base_page import BasePage


class _Participant:
    name = "participant"

    def __init__(self, driver: Driver):
        self.driver = driver
        self._pages: Dict[type, BasePage] = {}

    def _page(self, page_class):
        if page_class not in self._pages:
            self._pages[page_class] = page_class(self.driver)
        return self._pages[page_class]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{type(self).__name__}({self.driver.base_url})"


class SpotTV(_Participant):
    """The display side: calendar, join code, meetings."""

    name = "tv"

    def get_calendar_page(self) -> CalendarPage:
        return self._page(CalendarPage)

    def get_meeting_page(self) -> MeetingPage:
        return self._page(MeetingPage)

    def get_short_lived_pairing_code(self) -> str:
        """Read the join code currently shown on the calendar page."""
        return self.get_calendar_page().get_join_code()


class SpotRemote(_Participant):
    """The controller side: joins a TV by code, then commands it."""

    name = "remote"

    def get_join_code_page(self) -> JoinCodePage:
        return self._page(JoinCodePage)

    def get_remote_control_page(self) -> RemoteControlPage:
        return self._page(RemoteControlPage)


__all__ = ["SpotTV", "SpotRemote"]
