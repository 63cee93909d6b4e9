#!/usr/bin/env python3
"""Environment validator for the RL Stats client.

Usage:
  python -m scripts.env_check
"""
from __future__ import annotations

import sys
import urllib.parse
from pathlib import Path
from typing import Mapping, Optional

from rlstats.config.env import API_KEY_VAR, load_config
from rlstats.errors import MissingCredentialError, RlStatsError


def main(env: Optional[Mapping[str, str]] = None) -> int:
    root = Path.cwd()
    dotenv_path = root / ".env"
    print("=== env-check (RL Stats) ===")
    print(f"Project root: {root}")
    print(f".env present: {'yes' if dotenv_path.exists() else 'no'}\n")

    try:
        cfg = load_config(env)
    except MissingCredentialError:
        print(f"Missing required key:\n  - {API_KEY_VAR}")
        print("\nAdd it to your .env and re-run this check.")
        return 1
    except RlStatsError as exc:
        print(f"Invalid configuration: {exc}")
        return 2

    parsed = urllib.parse.urlparse(cfg.base_url)
    if not parsed.scheme or not parsed.netloc:
        print("RLSTATS_API_BASE must include scheme and host, e.g., https://api.rocketleaguestats.com/v1")
        return 2
    if parsed.scheme != "https":
        print("WARNING: RLSTATS_API_BASE is not HTTPS; the API key will be sent in clear text.")

    # Print resolved config (redact secret)
    print("Configuration OK. Resolved values:")
    print(f"  {API_KEY_VAR} = ***redacted***")
    print(f"  RLSTATS_API_BASE = {cfg.base_url}")
    print(f"  HTTP_TIMEOUT = {cfg.http_timeout}")
    print(f"  LOG_LEVEL = {cfg.log_level}")
    print(f"  EXPORT_DIR = {cfg.export_dir}")

    print("\nNext: run `python -m rlstats platforms` to check the key against the API.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
