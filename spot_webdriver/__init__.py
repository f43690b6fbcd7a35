"""Two-device browser sessions for Spot TV and Spot Remote end-to-end tests."""

from .cleanup import CleanupResult, run_best_effort
from .config import Config, get_config
from .errors import SpotError
from .participants import SpotRemote, SpotTV
from .session import SpotSession

__all__ = [
    "CleanupResult",
    "Config",
    "SpotError",
    "SpotRemote",
    "SpotSession",
    "SpotTV",
    "get_config",
    "run_best_effort",
]
