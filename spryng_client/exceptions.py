from enum import Enum
from typing import Optional

# Status codes returned by send.php / check.php
ERROR_MESSAGES = {
    -1: "Authentication failed",
    100: "Missing parameter",
    101: "Username too short",
    102: "Username too long",
    103: "Password too short",
    104: "Password too long",
    105: "Destination too short",
    106: "Destination too long",
    107: "Sender too long",
    108: "Sender too short",
    109: "Body too short",
    110: "Body too long",
    200: "Security error",
    201: "Unknown route",
    202: "Route access violation",
    203: "Insufficient credits",
    800: "Technical error",
}

UNKNOWN_ERROR_MESSAGE = "Unknown error"


def describe_error_code(code: int) -> str:
    """Resolve a gateway status code to a readable message."""
    return ERROR_MESSAGES.get(code, UNKNOWN_ERROR_MESSAGE)


class SpryngError(Exception):
    """Base exception for all gateway client errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(SpryngError, ValueError):
    """Raised when the client is constructed with invalid credentials."""
    pass


class ValidationErrorKind(str, Enum):
    DESTINATION_COUNT = "destination_count"
    DESTINATION_FORMAT = "destination_format"
    SENDER_MISSING = "sender_missing"
    NUMERIC_SENDER_TOO_LONG = "numeric_sender_too_long"
    ALPHANUMERIC_SENDER_TOO_LONG = "alphanumeric_sender_too_long"
    BODY_MISSING = "body_missing"
    BODY_TOO_LONG = "body_too_long"


class ValidationError(SpryngError, ValueError):
    """Raised when an SMS request breaks one of the gateway field rules."""
    def __init__(self, kind: ValidationErrorKind, message: str, field: Optional[str] = None):
        self.kind = kind
        self.field = field
        super().__init__(message)


class GatewayError(SpryngError):
    """Raised when the gateway answers with a non-success status code."""
    def __init__(self, code: int):
        self.code = code
        super().__init__(describe_error_code(code))

    def __str__(self) -> str:
        return f"{self.message} (code: {self.code})"


class TransportError(SpryngError):
    """Raised when the HTTP exchange itself fails."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ParseError(SpryngError):
    """Raised when a response body is not the number the gateway should return."""
    def __init__(self, message: str, body: str):
        self.body = body
        super().__init__(message)
