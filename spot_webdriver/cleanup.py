"""Best-effort cleanup steps run between tests."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class CleanupResult:
    """Outcome of one cleanup step."""

    name: str
    ok: bool
    duration_ms: int
    error: Optional[str] = None


def run_best_effort(name: str, action: Callable[[], object]) -> CleanupResult:
    """Run ``action`` and report how it went. Never raises."""
    start = time.time()
    try:
        action()
    except Exception as exc:
        duration_ms = int((time.time() - start) * 1000)
        logger.warning(
            "Cleanup step %s failed: %s",
            name,
            exc,
            extra={"step": name, "duration_ms": duration_ms},
        )
        return CleanupResult(name=name, ok=False, duration_ms=duration_ms, error=str(exc))

    duration_ms = int((time.time() - start) * 1000)
    logger.debug("Cleanup step %s done", name, extra={"step": name, "duration_ms": duration_ms})
    return CleanupResult(name=name, ok=True, duration_ms=duration_ms)


__all__ = ["CleanupResult", "run_best_effort"]
