"""Centralized error handling and custom exceptions."""

from typing import Any, Dict, Optional


class RollBotError(Exception):
    """Base exception for all interaction service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class InteractionValidationError(RollBotError):
    """Malformed or unauthenticated request. Answered with an HTTP 4xx."""

    def __init__(self, message: str, status_code: int = 400, details: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        super().__init__(
            message=message,
            error_code="INTERACTION_VALIDATION_ERROR",
            details=details,
        )


class UserFacingError(RollBotError):
    """Failure the invoking user should read as a normal reply."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="USER_FACING_ERROR",
            details=details,
        )


class DiceRollError(UserFacingError):
    """The dice engine rejected or failed to evaluate an expression."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, details=details)
        self.error_code = "DICE_ROLL_ERROR"


class SheetNotFoundError(UserFacingError):
    """The sheet does not exist or is not publicly visible."""

    def __init__(self, sheet_id: str, details: Optional[Dict[str, Any]] = None):
        self.sheet_id = sheet_id
        super().__init__(message=f"Sheet '{sheet_id}' not found", details=details)
        self.error_code = "SHEET_NOT_FOUND"


class UpstreamError(RollBotError):
    """Network failure or non-success status from an external service."""

    def __init__(self, service: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.service = service
        super().__init__(
            message=f"{service}: {message}",
            error_code="UPSTREAM_ERROR",
            details=details,
        )
