"""URL-safe Base64 codec (``-``/``_`` alphabet, padding optional on input).

Input is rewritten into the standard alphabet with canonical padding and handed
to :mod:`bintext.base64codec`. The rewrite is one character for one character,
so indices in diagnostics still point into the caller's text. Padding may be
omitted; padding that is present must already be canonical.
"""

import typing

from . import base64codec
from .constants import BASE64_BLOCK, BASE64URL_TRANSLATE_IN, BASE64URL_TRANSLATE_OUT, PAD
from .errors import DecodeError, DecodeResult, coerce_bytes, require_text

CODEC = "base64url"


def encode(data: "typing.Union[bytes, bytearray, memoryview]") -> str:
    return base64codec.encode(coerce_bytes(data)).translate(BASE64URL_TRANSLATE_OUT).rstrip(PAD)


def to_standard(text: str) -> "typing.Union[str, DecodeError]":
    """Rewrite URL-safe text into padded standard Base64, or explain why not."""
    for index, ch in enumerate(text):
        if ch in "+/":
            return DecodeError.invalid_character(
                CODEC, ch, index, reason="belongs to the standard alphabet, not the URL-safe one"
            )
    if text.endswith(PAD):
        # padding is optional, but when present it must already be canonical
        return text.translate(BASE64URL_TRANSLATE_IN)
    if len(text) % BASE64_BLOCK == 1:
        return DecodeError.invalid_length(CODEC, len(text), "a remainder of 1 modulo 4 is impossible")
    return text.translate(BASE64URL_TRANSLATE_IN) + PAD * (-len(text) % BASE64_BLOCK)


def decode(text: str) -> DecodeResult:
    text = require_text(text)
    if not text:
        return DecodeResult.success(b"")
    restored = to_standard(text)
    if isinstance(restored, DecodeError):
        return DecodeResult.failure(restored)
    error = base64codec.validate(restored, CODEC)
    if error is not None:
        return DecodeResult.failure(error)
    return base64codec.decode_validated(restored, CODEC)


def try_decode(text: str) -> "typing.Tuple[bool, typing.Optional[bytes], typing.Optional[str]]":
    return decode(text).as_tuple()


def decode_or_raise(text: str) -> bytes:
    return decode(text).unwrap()


__all__ = ["decode", "decode_or_raise", "encode", "to_standard", "try_decode"]
