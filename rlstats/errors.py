"""Exception types raised by the RL Stats reporting client."""

from __future__ import annotations

from typing import Optional


class RlStatsError(Exception):
    """Base class for every error the client reports to the user."""


class MissingCredentialError(RlStatsError):
    """The API key environment variable is absent or blank."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"{variable} environment variable not set.")


class RemoteQueryError(RlStatsError):
    """The remote statistics service could not be reached or returned an error.

    Attributes:
        endpoint: API path that was being queried
        status_code: HTTP status when the service answered, otherwise None
    """

    def __init__(self, endpoint: str, message: str, status_code: Optional[int] = None) -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(f"Query {endpoint} failed: {message}")


class OutOfRangeError(RlStatsError, IndexError):
    """A ``select`` index fell outside the result sequence."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        if length:
            valid = f"valid range is 0..{length - 1}"
        else:
            valid = "there are no results to select from"
        super().__init__(f"Cannot select index {index}: {valid}.")


class InvalidStatError(RlStatsError, ValueError):
    """A stat leaderboard was requested for an unknown stat name."""

    def __init__(self, name: str, choices) -> None:
        self.name = name
        self.choices = tuple(choices)
        super().__init__(
            f"Invalid stat '{name}'. Choose one of: {', '.join(self.choices)}."
        )
