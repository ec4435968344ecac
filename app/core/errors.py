from typing import Optional


class NotificationError(Exception):
    """Base class for failures surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def to_payload(self) -> dict:
        payload = {'error': self.message}
        if self.details:
            payload['details'] = self.details
        return payload


class InvalidInput(NotificationError):
    status_code = 400


class Forbidden(NotificationError):
    status_code = 403


class NotFound(NotificationError):
    status_code = 404


class StorageFailure(NotificationError):
    status_code = 500
