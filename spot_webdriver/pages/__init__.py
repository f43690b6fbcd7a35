"""
Page objects for the Spot TV and Spot Remote web apps.

TV side:
    CalendarPage, MeetingPage

Remote side:
    JoinCodePage, RemoteControlPage (with its MeetingInput)
"""

from .base_page import BasePage
from .calendar_page import CalendarPage
from .join_code_page import JoinCodePage
from .meeting_page import MeetingPage
from .remote_control_page import MeetingInput, RemoteControlPage

__all__ = [
    "BasePage",
    "CalendarPage",
    "JoinCodePage",
    "MeetingInput",
    "MeetingPage",
    "RemoteControlPage",
]
