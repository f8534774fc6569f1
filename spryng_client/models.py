"""
Gateway Models
==============
Value objects exchanged with the Spryng gateway.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel

from .exceptions import ConfigurationError


class Route(str, Enum):
    """Delivery routes offered by the gateway."""
    BUSINESS = "BUSINESS"
    ECONOMY = "ECONOMY"
    CUSTOM_0 = "0"
    CUSTOM_1 = "1"
    CUSTOM_2 = "2"
    CUSTOM_3 = "3"
    CUSTOM_4 = "4"
    CUSTOM_5 = "5"
    CUSTOM_6 = "6"
    CUSTOM_7 = "7"
    CUSTOM_8 = "8"
    CUSTOM_9 = "9"


VALID_ROUTES = frozenset(route.value for route in Route)


def is_valid_route(route: Union[str, Route]) -> bool:
    if isinstance(route, Route):
        return True
    return route in VALID_ROUTES


@dataclass(frozen=True)
class SmsRequest:
    """
    A single send request.

    Args:
        destinations: MSISDN numbers in international format without a
            leading "00" or "+" (1 to 100 entries)
        sender: Numeric (max 14) or alphanumeric (max 11) originator
        body: Message text, 160 chars or 612 with allow_long
        route: Route name or custom route digit
        allow_long: Let the gateway split the body into concatenated parts
        enable_unicode: Send the body as unicode (implies raw encoding)
        enable_raw_encoding: Send the body as UTF-8 instead of Latin-1
        reference: Reference used in delivery reports
        service: Tag for filtering statistics
    """
    destinations: Tuple[str, ...]
    sender: str
    body: str
    route: str = Route.BUSINESS.value
    allow_long: bool = False
    enable_unicode: bool = False
    enable_raw_encoding: bool = False
    reference: Optional[str] = None
    service: Optional[str] = None

    def __post_init__(self):
        if self.destinations is None:
            object.__setattr__(self, "destinations", ())
        elif isinstance(self.destinations, str):
            object.__setattr__(self, "destinations", (self.destinations,))
        else:
            object.__setattr__(self, "destinations", tuple(self.destinations))
        if isinstance(self.route, Route):
            object.__setattr__(self, "route", self.route.value)


USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 32


def _check_username(username: str) -> None:
    if not username or not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        raise ConfigurationError(
            f"Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters."
        )


@dataclass(frozen=True)
class PasswordAuth:
    """Username and password credentials."""
    username: str
    password: str = field(repr=False)

    def __post_init__(self):
        _check_username(self.username)
        if not self.password or not PASSWORD_MIN_LENGTH <= len(self.password) <= PASSWORD_MAX_LENGTH:
            raise ConfigurationError(
                f"Password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters."
            )

    def auth_fields(self) -> Dict[str, str]:
        return {"USERNAME": self.username, "PASSWORD": self.password}


@dataclass(frozen=True)
class KeyAuth:
    """Username and API key credentials. The key is opaque."""
    username: str
    api_key: str = field(repr=False)

    def __post_init__(self):
        _check_username(self.username)
        if not isinstance(self.api_key, str):
            raise ConfigurationError("API key must be a string.")

    def auth_fields(self) -> Dict[str, str]:
        return {"USERNAME": self.username, "SECRET": self.api_key}


Credentials = Union[PasswordAuth, KeyAuth]


class SendResult(BaseModel):
    """Outcome of an accepted send request."""
    success: bool = True
    status_code: int = 1
    destinations: Tuple[str, ...] = ()
    reference: Optional[str] = None
