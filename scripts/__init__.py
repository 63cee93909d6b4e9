"""Operator scripts for the RL Stats client.

Run them as modules from the repository root, e.g. ``python -m scripts.env_check``.
"""

__all__ = [
    "env_check",
    "raw_fetch",
]
