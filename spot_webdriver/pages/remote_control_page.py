"""Remote view available once paired with a TV."""

from ..driver import Driver
from .base_page import BasePage


class MeetingInput:
    """Free-text meeting name field on the remote control page."""

    INPUT = "[data-qa-id=meeting-name-input]"
    SUBMIT = "[data-qa-id=meeting-name-submit]"

    def __init__(self, driver: Driver):
        self.driver = driver

    def submit_meeting_name(self, name: str) -> None:
        self.driver.wait_for_visible(self.INPUT)
        self.driver.fill(self.INPUT, name)
        self.driver.click(self.SUBMIT)


class RemoteControlPage(BasePage):
    PATH = "/remote-control"
    ROOT = "[data-qa-id=remote-control-view]"

    def get_meeting_input(self) -> MeetingInput:
        return MeetingInput(self.driver)
