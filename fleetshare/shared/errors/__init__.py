from .base import (
    AppError,
    AuthHeaderMissingError,
    DomainError,
    InfrastructureError,
    InvalidTokenError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthHeaderMissingError",
    "DomainError",
    "InfrastructureError",
    "InvalidTokenError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
