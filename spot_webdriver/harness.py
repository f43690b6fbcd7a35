"""
Session Harness for Spot TV / Spot Remote

Launches one browser with two isolated contexts (a TV and a Remote) and
hands back a ready SpotSession. Also runs a pairing smoke test from the
command line.

Usage:
    python -m spot_webdriver.harness [--headed] [--tv-url URL] [--remote-url URL]
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterator, Optional

from playwright.sync_api import sync_playwright

from .config import Config, get_config
from .driver import Driver
from .errors import SpotError
from .logging_config import configure_logging, get_logger
from .participants import SpotRemote, SpotTV
from .session import SpotSession

logger = get_logger(__name__)

# TV runs on a landscape screen, Remote on a phone-sized one
TV_VIEWPORT = {"width": 1920, "height": 1080}
REMOTE_VIEWPORT = {"width": 412, "height": 915}


@dataclass
class ScenarioResult:
    """Result of a single scripted flow."""

    flow: str
    passed: bool
    duration_ms: int
    meeting_name: Optional[str] = None
    error: Optional[str] = None


@contextmanager
def open_session(config: Config) -> Iterator[SpotSession]:
    """Yield a session whose TV and Remote live in separate browser contexts.

    On exit both sides are disconnected best-effort before the browser
    closes, so a failing test still leaves the backend clean.
    """
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=config.headless)
        tv_context = browser.new_context(viewport=TV_VIEWPORT)
        remote_context = browser.new_context(
            viewport=REMOTE_VIEWPORT,
            is_mobile=True,
            has_touch=True,
        )
        try:
            spot_tv = SpotTV(Driver(tv_context.new_page(), config.tv_url))
            spot_remote = SpotRemote(Driver(remote_context.new_page(), config.remote_url))
            session = SpotSession(spot_tv, spot_remote, config)
            try:
                yield session
            finally:
                session.reset_connection()
        finally:
            remote_context.close()
            tv_context.close()
            browser.close()


def run_smoke(config: Config, meeting_name: Optional[str] = None) -> ScenarioResult:
    """Pair a Remote with a TV, join a meeting, then disconnect both."""
    start = time.time()
    joined = None

    try:
        with open_session(config) as session:
            session.connect_remote_to_tv()
            joined = session.join_meeting(meeting_name)
    except Exception as e:
        logger.error("Smoke flow failed: %s", e, exc_info=True, extra={"step": "smoke"})
        return ScenarioResult(
            flow="smoke",
            passed=False,
            duration_ms=int((time.time() - start) * 1000),
            meeting_name=joined,
            error=str(e),
        )

    return ScenarioResult(
        flow="smoke",
        passed=True,
        duration_ms=int((time.time() - start) * 1000),
        meeting_name=joined,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Spot TV / Remote pairing smoke test")
    parser.add_argument("--headed", action="store_true", help="Show the browser windows")
    parser.add_argument("--tv-url", help="Base URL of the Spot TV app")
    parser.add_argument("--remote-url", help="Base URL of the Spot Remote app")
    parser.add_argument("--meeting-name", help="Meeting to join instead of a generated one")
    parser.add_argument("--json-logs", action="store_true", help="Log JSON lines")
    parser.add_argument("--report", type=Path, help="Write the result as JSON to this file")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.headed:
        overrides["headless"] = False
    if args.tv_url:
        overrides["tv_url"] = args.tv_url
    if args.remote_url:
        overrides["remote_url"] = args.remote_url
    if args.json_logs:
        overrides["log_json"] = True
    try:
        config = get_config(**overrides)
    except SpotError as e:
        configure_logging(json_format=args.json_logs)
        logger.error("Invalid configuration: %s", e, extra={"step": "config"})
        return 1

    configure_logging(level=config.log_level, json_format=config.log_json)

    result = run_smoke(config, args.meeting_name)
    status = "PASS" if result.passed else "FAIL"
    logger.info("smoke: %s (%dms)", status, result.duration_ms)

    if args.report:
        args.report.write_text(json.dumps(asdict(result), indent=2))
        logger.info("Report saved: %s", args.report)

    return 0 if result.passed else 1


if __name__ == "__main__":
    sys.exit(main())
