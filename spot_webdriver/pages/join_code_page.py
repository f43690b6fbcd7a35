"""Remote landing page where the TV's join code is typed in."""

from .base_page import BasePage


class JoinCodePage(BasePage):
    PATH = "/"
    ROOT = "[data-qa-id=join-code-view]"
    CODE_INPUT = "[data-qa-id=join-code-input]"

    def enter_code(self, code: str) -> None:
        """Type ``code`` and submit it."""
        self.driver.wait_for_visible(self.CODE_INPUT)
        self.driver.fill(self.CODE_INPUT, code)
        self.driver.press(self.CODE_INPUT, "Enter")
