from .base import AppError, DomainError, FieldValidationError, MalformedRequestError
from .http import PLAIN_TEXT_STATUSES, handle_app_error, plain_text_response, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "FieldValidationError",
    "MalformedRequestError",
    "PLAIN_TEXT_STATUSES",
    "handle_app_error",
    "plain_text_response",
    "register_error_handler",
]
