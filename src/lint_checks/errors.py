# src/lint_checks/errors.py
"""Exceptions raised by lint-checks."""

from dataclasses import dataclass


class LintChecksError(Exception):
    """Base exception for lint-checks."""


class ConfigurationError(LintChecksError):
    """Raised when a required environment value or action input is missing."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


class CheckRunError(LintChecksError):
    """Raised when the check run could not be created through the GitHub API."""

    MESSAGE_TEMPLATE = "Error trying to create annotations using GitHub API: {message}"

    @classmethod
    def from_transport_error(cls, error: "TransportError") -> "CheckRunError":
        return cls(cls.MESSAGE_TEMPLATE.format(message=error.message))


@dataclass(frozen=True)
class TransportError:
    """Failed check run request (network error, non-2xx status or bad JSON)."""
    message: str
    status_code: int | None = None
