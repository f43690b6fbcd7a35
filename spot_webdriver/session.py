"""
Spot TV / Spot Remote test session.

A session sequences page-object calls on a TV and a Remote so tests can
pair, connect, join meetings and disconnect in one line each. It keeps no
connection state of its own: whether the two are paired is whatever the
browsers say.

Usage:
    session = SpotSession(tv, remote, config)
    session.connect_remote_to_tv()
    name = session.join_meeting()
    session.reset_connection()
"""

from __future__ import annotations

import time
from typing import Any, Mapping, Optional, Tuple

from .cleanup import CleanupResult, run_best_effort
from .config import Config
from .logging_config import get_logger
from .participants import SpotRemote, SpotTV

logger = get_logger(__name__)

MEETING_NAME_PREFIX = "ui-test-"

# In-page disconnects resolve ``done`` whether the signaling client
# disconnects, rejects, or is missing entirely.
_DISCONNECT_TV_SCRIPT = """done => {
    try {
        window.spot.remoteControlServer.disconnect()
            .then(() => done(), () => done());
    } catch (e) {
        done();
    }
}"""

_DISCONNECT_REMOTE_SCRIPT = """done => {
    try {
        window.spot.remoteControlClient.disconnect()
            .then(() => done(), () => done());
    } catch (e) {
        done();
    }
}"""


def default_meeting_name() -> str:
    """Return ``ui-test-<epoch milliseconds>``."""
    return f"{MEETING_NAME_PREFIX}{int(time.time() * 1000)}"


class SpotSession:
    """A TV and a Remote under test, with no connection between them yet."""

    def __init__(self, spot_tv: SpotTV, spot_remote: SpotRemote, config: Config):
        self._spot_tv = spot_tv
        self._spot_remote = spot_remote
        self._config = config

    @property
    def spot_tv(self) -> SpotTV:
        return self._spot_tv

    @property
    def spot_remote(self) -> SpotRemote:
        return self._spot_remote

    @property
    def config(self) -> Config:
        return self._config

    def connect_remote_to_tv(self) -> None:
        """Pair the Remote with the TV's join code and wait for remote control."""
        self._submit_join_code()

        remote_control_page = self._spot_remote.get_remote_control_page()
        remote_control_page.wait_for_visible()
        logger.info(
            "Remote connected to TV",
            extra={"participant": self._spot_remote.name, "step": "connect"},
        )

    def connect_screenshare_only_remote_to_tv(self) -> None:
        """Pair the Remote with the TV in share-only mode.

        Share-only remotes never show the remote control page, so there is
        nothing to wait for here.
        """
        self._submit_join_code(query_params={"share": True})

    def force_disconnect_tv(self) -> CleanupResult:
        """Disconnect the TV from the signaling room.

        Keeps the next test from stalling while the backend resolves a
        conflict with the TV's previous connection.
        """
        return run_best_effort(
            "force_disconnect_tv",
            lambda: self._spot_tv.driver.execute_async(_DISCONNECT_TV_SCRIPT),
        )

    def force_disconnect_remote(self) -> CleanupResult:
        """Disconnect the Remote from the signaling room."""
        return run_best_effort(
            "force_disconnect_remote",
            lambda: self._spot_remote.driver.execute_async(_DISCONNECT_REMOTE_SCRIPT),
        )

    def get_tv(self) -> SpotTV:
        return self._spot_tv

    def get_remote(self) -> SpotRemote:
        return self._spot_remote

    def is_backend_enabled(self) -> bool:
        """Whether this run pairs through the backend (a pairing code is set)."""
        return bool(self._config.backend_pairing_code)

    def join_meeting(self, meeting_name: Optional[str] = None) -> str:
        """
        Make the TV join a meeting through the Remote.

        Args:
            meeting_name: Meeting to join; a ``ui-test-<timestamp>`` name is
                generated when empty.

        Returns:
            The meeting name the TV was asked to join.
        """
        remote_control_page = self._spot_remote.get_remote_control_page()
        remote_control_page.wait_for_visible()

        name = meeting_name or default_meeting_name()
        remote_control_page.get_meeting_input().submit_meeting_name(name)
        logger.info(
            "Submitted meeting name %s",
            name,
            extra={"participant": self._spot_remote.name, "step": "join_meeting"},
        )

        self._spot_tv.get_meeting_page().wait_for_visible()

        return name

    def reset_connection(self) -> Tuple[CleanupResult, CleanupResult]:
        """Disconnect both sides, TV first. Failures are logged, not raised."""
        return self.force_disconnect_tv(), self.force_disconnect_remote()

    def start_remote(
        self,
        join_code: str,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Open the Remote's join code page and enter ``join_code``."""
        join_code_page = self._spot_remote.get_join_code_page()

        join_code_page.visit(query_params)
        join_code_page.enter_code(join_code)

    def start_tv(self) -> None:
        """Open the TV's calendar page."""
        calendar_page = self._spot_tv.get_calendar_page()
        query_params = {"testPermanentPairingCode": self._config.backend_pairing_code or ""}

        logger.info("Starting TV", extra={"participant": self._spot_tv.name, "step": "start_tv"})
        calendar_page.visit(query_params, self._config.max_page_load_wait)

    def _submit_join_code(self, query_params: Optional[Mapping[str, Any]] = None) -> None:
        self.start_tv()

        join_code = self._spot_tv.get_short_lived_pairing_code()

        self.start_remote(join_code, query_params)


__all__ = ["SpotSession", "default_meeting_name", "MEETING_NAME_PREFIX"]
