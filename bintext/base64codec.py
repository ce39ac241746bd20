"""Standard Base64 codec (``A-Za-z0-9+/`` with ``=`` padding)."""

import base64
import binascii
import typing

from .constants import BASE64_BLOCK, BASE64_CHARS, BASE64_INDEX, BASE64_SPARE_BITS, PAD
from .errors import DecodeError, DecodeResult, coerce_bytes, require_text

CODEC = "base64"


def encode(data: "typing.Union[bytes, bytearray, memoryview]") -> str:
    return base64.b64encode(coerce_bytes(data)).decode("ascii")


def validate(text: str, codec: str = CODEC) -> typing.Optional[DecodeError]:
    """Return the first structural problem in ``text``, or ``None``."""
    if len(text) % BASE64_BLOCK:
        return DecodeError.invalid_length(codec, len(text), "must be a multiple of 4")
    body = text.rstrip(PAD)
    for index, ch in enumerate(body):
        if ch not in BASE64_CHARS:
            reason = "precedes non-padding data" if ch == PAD else "is not in the alphabet"
            return DecodeError.invalid_character(codec, ch, index, reason=reason)
    spare = BASE64_SPARE_BITS.get(len(text) - len(body))
    if spare is None:
        return DecodeError.invalid_character(
            codec, PAD, len(body), reason="starts a padding run longer than 2"
        )
    if body and BASE64_INDEX[body[-1]] & ((1 << spare) - 1):
        return DecodeError.invalid_character(
            codec, body[-1], len(body) - 1, reason="carries non-zero trailing bits"
        )
    return None


def decode_validated(text: str, codec: str = CODEC) -> DecodeResult:
    """Decode text that already passed :func:`validate`."""
    try:
        return DecodeResult.success(base64.b64decode(text, validate=True))
    except binascii.Error as exc:  # pragma: no cover - validate() covers the alphabet
        return DecodeResult.failure(
            DecodeError.invalid_character(codec, text[0], 0, reason=f"rejected by decoder ({exc})")
        )


def decode(text: str) -> DecodeResult:
    text = require_text(text)
    if not text:
        return DecodeResult.success(b"")
    error = validate(text)
    if error is not None:
        return DecodeResult.failure(error)
    return decode_validated(text)


def try_decode(text: str) -> "typing.Tuple[bool, typing.Optional[bytes], typing.Optional[str]]":
    return decode(text).as_tuple()


def decode_or_raise(text: str) -> bytes:
    return decode(text).unwrap()


__all__ = ["decode", "decode_or_raise", "decode_validated", "encode", "try_decode", "validate"]
