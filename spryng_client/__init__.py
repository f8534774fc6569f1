"""
Spryng Gateway Client
=====================
Credit checks and SMS sending over the Spryng HTTP API.

Usage:
    from spryng_client import GatewayClient, SmsRequest

    client = GatewayClient.with_password("username", "password")
    print(client.get_credit_amount())

    client.execute_sms_request(SmsRequest(
        destinations=["31612345678"],
        sender="Company",
        body="Hello!",
    ))
"""

__version__ = "0.1.0"

from spryng_client.config import ClientConfig
from spryng_client.models import (
    Route,
    VALID_ROUTES,
    is_valid_route,
    SmsRequest,
    PasswordAuth,
    KeyAuth,
    Credentials,
    SendResult,
)
from spryng_client.exceptions import (
    SpryngError,
    ConfigurationError,
    ValidationError,
    ValidationErrorKind,
    GatewayError,
    TransportError,
    ParseError,
    ERROR_MESSAGES,
    describe_error_code,
)
from spryng_client.request_builder import (
    FieldMap,
    validate,
    is_msisdn_compliant,
    is_digits_only,
)
from spryng_client.encoding import custom_url_encode, serialize_fields, encode_body
from spryng_client.client import GatewayClient

__all__ = [
    # Config
    "ClientConfig",
    # Models
    "Route",
    "VALID_ROUTES",
    "is_valid_route",
    "SmsRequest",
    "PasswordAuth",
    "KeyAuth",
    "Credentials",
    "SendResult",
    # Errors
    "SpryngError",
    "ConfigurationError",
    "ValidationError",
    "ValidationErrorKind",
    "GatewayError",
    "TransportError",
    "ParseError",
    "ERROR_MESSAGES",
    "describe_error_code",
    # Request building
    "FieldMap",
    "validate",
    "is_msisdn_compliant",
    "is_digits_only",
    # Encoding
    "custom_url_encode",
    "serialize_fields",
    "encode_body",
    # Client
    "GatewayClient",
]
