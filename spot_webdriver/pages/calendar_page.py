"""TV home screen showing upcoming meetings and the join code."""

from .base_page import BasePage


class CalendarPage(BasePage):
    PATH = "/tv"
    ROOT = "[data-qa-id=home-view]"
    JOIN_CODE = "[data-qa-id=info-code]"

    def get_join_code(self) -> str:
        """Return the short-lived code the TV currently advertises."""
        self.driver.wait_for_visible(self.JOIN_CODE)
        return self.driver.text_of(self.JOIN_CODE)
