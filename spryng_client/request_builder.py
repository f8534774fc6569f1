"""
Request Builder
===============
Validates an SmsRequest and turns it into the gateway's field map.

Rules are checked in a fixed order and the first failure is raised.
Nothing is returned unless every rule passes.
"""

import re
from typing import Dict

from .exceptions import ValidationError, ValidationErrorKind
from .models import SmsRequest

FieldMap = Dict[str, str]

MAX_DESTINATIONS = 100
MAX_NUMERIC_SENDER_LENGTH = 14
MAX_ALPHANUMERIC_SENDER_LENGTH = 11
MAX_BODY_LENGTH = 160
MAX_LONG_BODY_LENGTH = 612

_MSISDN_PATTERN = re.compile(r"[1-9][0-9]{3,14}")
_DIGITS_PATTERN = re.compile(r"[0-9]+")


def is_msisdn_compliant(number: str) -> bool:
    """
    Check a destination against the MSISDN-numeric format.

    International format without leading "00" or "+": a non-zero first
    digit followed by 3 to 14 more digits.
    """
    return bool(_MSISDN_PATTERN.fullmatch(number))


def is_digits_only(text: str) -> bool:
    return bool(_DIGITS_PATTERN.fullmatch(text))


def _check_destinations(destinations) -> str:
    if not destinations or len(destinations) > MAX_DESTINATIONS:
        raise ValidationError(
            ValidationErrorKind.DESTINATION_COUNT,
            f"Between 1 and {MAX_DESTINATIONS} destination numbers are required.",
            field="DESTINATION",
        )
    for number in destinations:
        if not isinstance(number, str) or not is_msisdn_compliant(number):
            raise ValidationError(
                ValidationErrorKind.DESTINATION_FORMAT,
                f"Destination {number!r} is not MSISDN-numeric compliant.",
                field="DESTINATION",
            )
    return ",".join(destinations)


def _check_sender(sender: str) -> str:
    if not sender:
        raise ValidationError(
            ValidationErrorKind.SENDER_MISSING,
            "Sender is required.",
            field="SENDER",
        )
    if is_digits_only(sender):
        if len(sender) > MAX_NUMERIC_SENDER_LENGTH:
            raise ValidationError(
                ValidationErrorKind.NUMERIC_SENDER_TOO_LONG,
                f"Numeric senders can not be longer than {MAX_NUMERIC_SENDER_LENGTH} characters.",
                field="SENDER",
            )
    elif len(sender) > MAX_ALPHANUMERIC_SENDER_LENGTH:
        raise ValidationError(
            ValidationErrorKind.ALPHANUMERIC_SENDER_TOO_LONG,
            f"Alphanumeric senders can not be longer than {MAX_ALPHANUMERIC_SENDER_LENGTH} characters.",
            field="SENDER",
        )
    return sender


def _check_body(body: str, allow_long: bool) -> str:
    if not body:
        raise ValidationError(
            ValidationErrorKind.BODY_MISSING,
            "Body is required.",
            field="BODY",
        )
    limit = MAX_LONG_BODY_LENGTH if allow_long else MAX_BODY_LENGTH
    if len(body) > limit:
        hint = "" if allow_long else " without enabling long messages"
        raise ValidationError(
            ValidationErrorKind.BODY_TOO_LONG,
            f"Body can not be longer than {limit} characters{hint}.",
            field="BODY",
        )
    return body


def validate(request: SmsRequest) -> FieldMap:
    """
    Validate a request and build its field map.

    Args:
        request: The SMS request to check

    Returns:
        Ordered mapping of gateway field names to values

    Raises:
        ValidationError: On the first rule the request breaks
    """
    destination = _check_destinations(request.destinations)
    sender = _check_sender(request.sender)
    route = str(request.route)
    body = _check_body(request.body, request.allow_long)

    fields: FieldMap = {
        "DESTINATION": destination,
        "SENDER": sender,
    }
    if request.service:
        fields["SERVICE"] = request.service
    fields["ROUTE"] = route
    fields["BODY"] = body
    if request.reference:
        fields["REFERENCE"] = request.reference
    if request.enable_unicode or request.enable_raw_encoding:
        fields["RAWENCODING"] = "1"
    if request.enable_unicode:
        fields["UNICODE"] = "1"
    fields["ALLOWLONG"] = "1" if request.allow_long else "0"

    return fields
