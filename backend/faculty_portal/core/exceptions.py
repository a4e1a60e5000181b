class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

class InvalidWindowError(AppError):
    """Raised when a schedule window length is negative or unreasonably large."""
    def __init__(self, num_days: int, max_days: int):
        super().__init__(
            f"Window length must be between 0 and {max_days} days, got {num_days}",
            status_code=400,
            details={"num_days": num_days, "max_days": max_days},
        )

class DataUnavailableError(AppError):
    """Raised when the backing store cannot be read."""
    def __init__(self, path: str, reason: str | None = None):
        details = {"path": path}
        if reason:
            details["reason"] = reason
        super().__init__(f"Data unavailable for '{path}'", status_code=503, details=details)
