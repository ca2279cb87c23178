"""
Application error taxonomy.

Every error carries the HTTP status it maps to and a generic message that is
safe to show to clients. Handlers in ``app.main`` render them as
``{"success": false, "message": ...}``.
"""
from typing import Optional


class AppError(Exception):
    status_code: int = 500
    message: str = "Server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    message = "Missing or invalid fields"


class DuplicateEmail(AppError):
    status_code = 400
    message = "Email already registered"


class DuplicateSubscription(AppError):
    status_code = 409
    message = "Already subscribed"


class NotFound(AppError):
    status_code = 404
    message = "Record not found"


class InvalidCredential(AppError):
    status_code = 401
    message = "Invalid email or password"


class InvalidOtp(AppError):
    status_code = 400
    message = "Invalid OTP"


class StoreError(AppError):
    status_code = 500
    message = "Database error"


class DispatchError(AppError):
    status_code = 500
    message = "Failed to send OTP"


class GatewayError(AppError):
    status_code = 500
    message = "Failed to create payment order"
