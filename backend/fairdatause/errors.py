from __future__ import annotations

from typing import Any


class FairDataUseError(Exception):
    """Anticipated failure rendered as ``{"success": false, "message": ...}``."""

    status_code = 400

    def __init__(self, message: str, *, error: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": False, "message": self.message}
        if self.error is not None:
            payload["error"] = self.error
        return payload


class ValidationError(FairDataUseError):
    status_code = 400


class MalformedBodyError(FairDataUseError):
    status_code = 400

    def __init__(self, message: str = "Invalid JSON in request body") -> None:
        super().__init__(message)


class DuplicateError(FairDataUseError):
    status_code = 400


class NotFoundError(FairDataUseError):
    status_code = 404


class ConfigurationError(FairDataUseError):
    # Reported as a client error for compatibility with existing callers.
    status_code = 400

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            "Reddit API credentials are not configured properly",
            error=f"Missing Reddit API credentials: {', '.join(self.missing)}",
        )


class VerificationFailure(FairDataUseError):
    status_code = 400

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(
            f"Reddit user '{username}' does not exist. Please check the username and try again."
        )


class StorageError(FairDataUseError):
    status_code = 500

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Internal server error: {detail}")
