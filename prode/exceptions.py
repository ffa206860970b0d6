"""
Error taxonomy for prediction submissions.

Every error carries a stable ``code`` that is returned to the caller as
``{"error": code}`` and the HTTP status it maps to.
"""
from typing import Optional


class PredictionError(Exception):
    """Base exception for prediction submission errors."""
    status_code = 400
    code = "prediction_error"

    def __init__(self, code: Optional[str] = None):
        if code is not None:
            self.code = code
        super().__init__(self.code)


class ValidationError(PredictionError):
    """Malformed or missing input. The client must correct it and resend."""
    code = "invalid_request"


class LimitExceeded(PredictionError):
    """Stake above the configured maximum."""
    code = "bet_over_max"


class CutoffPassed(PredictionError):
    """Submission at or after the match deadline."""
    status_code = 403
    code = "cutoff_passed"


class NotFound(PredictionError):
    """Referenced match does not exist."""
    status_code = 404
    code = "match_not_found"


class StorageFailure(PredictionError):
    """Backend error. Safe to retry, the write is idempotent."""
    status_code = 500
    code = "storage_failure"

    @classmethod
    def from_error(cls, error: Exception) -> "StorageFailure":
        """Keep only the backend's own message, without the SQL or its parameters."""
        orig = getattr(error, "orig", None)
        return cls(str(orig) if orig is not None else str(error))
