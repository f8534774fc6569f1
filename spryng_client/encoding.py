"""
Body Encoding
=============
Percent-encoding and charset selection for gateway POST bodies.

The gateway does not expect standard form encoding: only a fixed set of
characters is escaped and everything else, including non-ASCII text,
is sent as-is in the body charset.
"""

from typing import Mapping, Tuple

SPECIAL_CHARACTERS = "%$&+,/:;=?@ <>#{}|\\^~[]`"

# Single-pass table, so "%" produced for one character is never re-escaped
_ESCAPES = {ord(char): f"%{ord(char):02x}" for char in SPECIAL_CHARACTERS}

LATIN1 = "ISO-8859-1"
UTF8 = "UTF-8"


def custom_url_encode(value: str) -> str:
    """
    Escape the gateway's special characters as lowercase %xx sequences.

    >>> custom_url_encode("a b%c")
    'a%20b%25c'
    """
    return value.translate(_ESCAPES)


def serialize_fields(fields: Mapping[str, str]) -> str:
    """Join fields as key=value pairs in insertion order."""
    return "&".join(f"{key}={custom_url_encode(value)}" for key, value in fields.items())


def select_charset(fields: Mapping[str, str]) -> str:
    return UTF8 if "RAWENCODING" in fields else LATIN1


def encode_body(fields: Mapping[str, str]) -> Tuple[bytes, str]:
    """
    Build the POST body for a field map.

    Returns:
        Tuple of (body octets, charset name)
    """
    charset = select_charset(fields)
    # Latin-1 cannot carry every character; unmappable ones become "?"
    return serialize_fields(fields).encode(charset, errors="replace"), charset
