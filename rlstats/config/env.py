"""Configuration and environment utilities for the RL Stats client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from rlstats.errors import MissingCredentialError, RlStatsError

API_KEY_VAR = "RLSTATS"
DEFAULT_API_BASE = "https://api.rocketleaguestats.com/v1"
DEFAULT_HTTP_TIMEOUT = 30
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_EXPORT_DIR = "./exports"


@dataclass(frozen=True)
class ApiConfig:
    """Resolved settings for one CLI invocation.

    Attributes:
        api_key: Credential sent in the Authorization header
        base_url: Root URL of the statistics API, without trailing slash
        http_timeout: Per-request timeout in seconds
        log_level: Name of the logging level (e.g. "INFO")
        export_dir: Directory that receives --to-excel / --to-json output
    """
    api_key: str = ""
    base_url: str = DEFAULT_API_BASE
    http_timeout: int = DEFAULT_HTTP_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    export_dir: Path = Path(DEFAULT_EXPORT_DIR)

    def __repr__(self) -> str:
        # keep the key out of logs and tracebacks
        return (
            f"ApiConfig(api_key='***', base_url={self.base_url!r}, "
            f"http_timeout={self.http_timeout}, log_level={self.log_level!r}, "
            f"export_dir={str(self.export_dir)!r})"
        )


def get_export_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    """Get the base export directory path.

    Returns:
        Path object pointing to the export directory.
        Defaults to './exports' if EXPORT_DIR environment variable not set.
    """
    source = os.environ if env is None else env
    return Path(source.get("EXPORT_DIR") or DEFAULT_EXPORT_DIR).expanduser().resolve()


def load_config(env: Optional[Mapping[str, str]] = None) -> ApiConfig:
    """Build an ApiConfig from the environment.

    A ``.env`` file in the working directory is loaded first when reading the
    real process environment. Pass ``env`` to resolve from an explicit mapping
    instead (no ``.env`` lookup).

    Raises:
        MissingCredentialError: RLSTATS is absent or blank
        RlStatsError: HTTP_TIMEOUT is not a positive integer
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    api_key = (env.get(API_KEY_VAR) or "").strip()
    if not api_key:
        raise MissingCredentialError(API_KEY_VAR)

    raw_timeout = env.get("HTTP_TIMEOUT") or str(DEFAULT_HTTP_TIMEOUT)
    try:
        http_timeout = int(raw_timeout)
    except ValueError:
        raise RlStatsError(f"HTTP_TIMEOUT must be an integer, got '{raw_timeout}'.") from None
    if http_timeout <= 0:
        raise RlStatsError(f"HTTP_TIMEOUT must be positive, got {http_timeout}.")

    return ApiConfig(
        api_key=api_key,
        base_url=(env.get("RLSTATS_API_BASE") or DEFAULT_API_BASE).rstrip("/"),
        http_timeout=http_timeout,
        log_level=(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        export_dir=get_export_dir(env),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="[%(levelname)s] %(message)s",
    )
