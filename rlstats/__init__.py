"""RL Stats Report - command line reports for the Rocket League stats API.

This package queries the remote statistics service and turns its records
into ordered tabular reports (playlist populations, player profiles,
leaderboards) for terminal display or export.
"""

# Package metadata
__version__ = "1.0.0"
__license__ = "MIT"
__all__ = [
    "api",
    "config",
    "export",
    "report",
    "util_time",
]

# Import key modules for easy access
from .api.client import RlStatsClient
from .config.env import ApiConfig, load_config
from .errors import (
    InvalidStatError,
    MissingCredentialError,
    OutOfRangeError,
    RemoteQueryError,
    RlStatsError,
)

# Export key classes and functions at package level
__all__.extend([
    "ApiConfig",
    "InvalidStatError",
    "MissingCredentialError",
    "OutOfRangeError",
    "RemoteQueryError",
    "RlStatsClient",
    "RlStatsError",
    "load_config",
])
