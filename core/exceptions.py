class ExternalServiceError(Exception):
    """Raised when a geocoding, routing or weather provider fails or returns an unusable response."""

    def __init__(self, service: str, message: str, status_code: int | None = None):
        self.service = service
        self.status_code = status_code
        detail = f"{service} error"
        if status_code is not None:
            detail += f" ({status_code})"
        super().__init__(f"{detail}: {message}")


class StaleResultError(Exception):
    """Raised when a computed result belongs to a trip draft that has changed since."""
