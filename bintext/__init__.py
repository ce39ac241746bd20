"""
BINTEXT - binary-to-text codec suite

Stateless converters between raw bytes and hexadecimal, Base32 (RFC 4648),
Base45 (RFC 9285), Base64 and URL-safe Base64 text.

Every ``*encode`` function takes bytes and returns text. Every ``*decode``
function takes text and returns a ``DecodeResult``; a malformed input is a
failed result carrying a ``DecodeError``, never an exception.
"""

from . import base32codec, base45codec, base64codec, base64urlcodec, hexcodec
from .api_strings import (
    b32decode,
    b32encode,
    b45decode,
    b45encode,
    b64decode,
    b64decode_text,
    b64encode,
    b64encode_text,
    b64urldecode,
    b64urlencode,
    hexdecode,
    hexencode,
)
from .errors import DecodeError, DecodeErrorKind, DecodeFailure, DecodeResult
from .version import __version__

__all__ = [
    "__version__",
    "DecodeError",
    "DecodeErrorKind",
    "DecodeFailure",
    "DecodeResult",
    "b32decode",
    "b32encode",
    "b45decode",
    "b45encode",
    "b64decode",
    "b64decode_text",
    "b64encode",
    "b64encode_text",
    "b64urldecode",
    "b64urlencode",
    "base32codec",
    "base45codec",
    "base64codec",
    "base64urlcodec",
    "hexcodec",
    "hexdecode",
    "hexencode",
]
