from __future__ import annotations

import typing


class AttemptsExhaustedError(Exception):
    """retry used up its attempt budget without a success."""

    attempts: int
    last_error: typing.Any

    def __init__(self, attempts: int, last_error: typing.Any = None) -> None:
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"Failed after {attempts} attempts")


class OutcomeAlreadyResolvedError(RuntimeError):
    """An outcome was written twice. Every outcome has exactly one producer."""


class OutcomePendingError(RuntimeError):
    """The result of a pending outcome was read."""


__all__ = ("AttemptsExhaustedError", "OutcomeAlreadyResolvedError", "OutcomePendingError")
