from .base_page import BasePage


class MeetingPage(BasePage):
    """TV view while in a meeting."""

    PATH = "/meeting"
    ROOT = "[data-qa-id=meeting-view]"
