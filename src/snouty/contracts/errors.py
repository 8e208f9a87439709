# src/snouty/contracts/errors.py
"""Error types surfaced by the snouty CLI.

Every error is terminal for the current invocation. The CLI catches
SnoutyError once, prints its message and exits with status 1.
"""


class SnoutyError(Exception):
    """Base class for all snouty errors."""


class MissingConfigError(SnoutyError):
    """Raised when a required environment variable is absent or unusable."""

    def __init__(self, name: str, reason: str | None = None) -> None:
        self.name = name
        self.reason = reason
        if reason is None:
            message = f"missing environment variable: {name}"
        else:
            message = f"invalid environment variable {name}: {reason}"
        super().__init__(message)


class InvalidArgumentsError(SnoutyError):
    """Raised for malformed CLI tokens or malformed stdin input."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"invalid arguments: {detail}")


class ValidationFailedError(SnoutyError):
    """Raised when parameters violate their schema profile.

    Carries the full list of violations, not just the first one.
    """

    def __init__(self, violations: list[str]) -> None:
        self.violations = list(violations)
        super().__init__(f"validation failed: {', '.join(self.violations)}")


class TransportError(SnoutyError):
    """Raised when the HTTP request could not complete (network, timeout)."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"HTTP request failed: {detail}")


class ApiError(SnoutyError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(f"API error: {status} - {body}")
