"""RFC 4648 Base32 codec.

Bytes are regrouped into 5-bit symbols big-endian: the input is unpacked into a
flat bit array, zero-filled up to a multiple of five, and read off five bits at a
time. Decoding runs the same pipeline backwards and drops the trailing bits that
do not complete a byte.
"""

import typing

import numpy as np

from .constants import (
    BASE32_BITS,
    BASE32_BLOCK,
    BASE32_INDEX,
    BASE32_PAD_FOR_SYMBOLS,
    BASE32_TABLE,
    PAD,
)
from .errors import DecodeError, DecodeResult, coerce_bytes, require_text

CODEC = "base32"
_WEIGHTS = np.array([16, 8, 4, 2, 1], dtype=np.uint8)


def encode(data: "typing.Union[bytes, bytearray, memoryview]") -> str:
    raw = coerce_bytes(data)
    if not raw:
        return ""
    bits = np.unpackbits(np.frombuffer(raw, dtype=np.uint8))
    symbols = -(-bits.size // BASE32_BITS)
    bits = np.pad(bits, (0, symbols * BASE32_BITS - bits.size))
    values = bits.reshape(-1, BASE32_BITS) @ _WEIGHTS
    text = BASE32_TABLE[values].tobytes().decode("ascii")
    return text + PAD * (-len(text) % BASE32_BLOCK)


def _unpack_symbols(values: "typing.List[int]") -> bytes:
    symbols = np.array(values, dtype=np.uint8)
    # keep the low five bits of each symbol, most significant first
    bits = np.unpackbits(symbols[:, None], axis=1)[:, 8 - BASE32_BITS:].ravel()
    byte_count = len(values) * BASE32_BITS // 8
    return np.packbits(bits[: byte_count * 8]).tobytes()


def decode(text: str) -> DecodeResult:
    stripped = require_text(text).strip()
    if not stripped:
        return DecodeResult.success(b"")
    if len(stripped) % BASE32_BLOCK:
        return DecodeResult.failure(
            DecodeError.invalid_length(CODEC, len(stripped), "must be a multiple of 8")
        )

    body = stripped.rstrip(PAD)
    values = []
    for index, ch in enumerate(body):
        value = BASE32_INDEX.get(ch)
        if value is None:
            reason = "precedes non-padding data" if ch == PAD else "is not in the alphabet"
            return DecodeResult.failure(
                DecodeError.invalid_character(CODEC, ch, index, reason=reason)
            )
        values.append(value)

    significant = BASE32_BLOCK - (len(stripped) - len(body))
    if BASE32_PAD_FOR_SYMBOLS.get(significant) is None:
        return DecodeResult.failure(
            DecodeError.invalid_character(
                CODEC, PAD, len(body), reason="starts a padding run of illegal length"
            )
        )

    spare = len(values) * BASE32_BITS % 8
    if values[-1] & ((1 << spare) - 1):
        return DecodeResult.failure(
            DecodeError.invalid_character(
                CODEC, body[-1], len(body) - 1, reason="carries non-zero trailing bits"
            )
        )

    decoded = _unpack_symbols(values)
    if len(decoded) != len(values) * BASE32_BITS // 8:
        return DecodeResult.failure(
            DecodeError.invalid_character(
                CODEC, body[-1], len(body) - 1, reason="could not be regrouped into bytes"
            )
        )
    return DecodeResult.success(decoded)


def try_decode(text: str) -> "typing.Tuple[bool, typing.Optional[bytes], typing.Optional[str]]":
    return decode(text).as_tuple()


def decode_or_raise(text: str) -> bytes:
    return decode(text).unwrap()


__all__ = ["decode", "decode_or_raise", "encode", "try_decode"]
