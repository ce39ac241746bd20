"""RFC 9285 Base45 codec.

Two bytes ``x = (b0 << 8) | b1`` become three symbols, least significant first;
a trailing single byte becomes two. A triplet can spell values up to 91124 but
only 0..65535 are byte pairs, so decoding rejects anything above the chunk's
range instead of wrapping it.
"""

import typing

import numpy as np

from .constants import (
    BASE45_BASE,
    BASE45_INDEX,
    BASE45_PAIR_MAX,
    BASE45_SINGLE_MAX,
    BASE45_TABLE,
)
from .errors import DecodeError, DecodeResult, coerce_bytes, require_text

CODEC = "base45"
_TRIPLET_WEIGHTS = np.array([1, BASE45_BASE, BASE45_BASE * BASE45_BASE], dtype=np.uint32)


def encode(data: "typing.Union[bytes, bytearray, memoryview]") -> str:
    raw = coerce_bytes(data)
    if not raw:
        return ""
    arr = np.frombuffer(raw, dtype=np.uint8)
    even = arr.size - arr.size % 2
    pairs = arr[:even].reshape(-1, 2).astype(np.uint32)
    x = (pairs[:, 0] << 8) | pairs[:, 1]
    digits = np.stack(
        [x % BASE45_BASE, (x // BASE45_BASE) % BASE45_BASE, x // (BASE45_BASE * BASE45_BASE)],
        axis=1,
    ).ravel()
    if arr.size % 2:
        last = int(arr[-1])
        tail = np.array([last % BASE45_BASE, last // BASE45_BASE], dtype=np.uint32)
        digits = np.concatenate([digits, tail])
    return BASE45_TABLE[digits].tobytes().decode("ascii")


def encoded_length(byte_count: int) -> int:
    return (byte_count // 2) * 3 + (2 if byte_count % 2 else 0)


def decode(text: str) -> DecodeResult:
    text = require_text(text)
    if not text:
        return DecodeResult.success(b"")
    if len(text) % 3 == 1:
        return DecodeResult.failure(
            DecodeError.invalid_length(CODEC, len(text), "a remainder of 1 modulo 3 is impossible")
        )

    bad = next((i for i, ch in enumerate(text) if ch not in BASE45_INDEX), None)
    # groups before the one holding a bad character still get their overflow check first
    scan_end = len(text) if bad is None else bad - bad % 3
    values = np.fromiter(
        (BASE45_INDEX[ch] for ch in text[:scan_end]), dtype=np.uint32, count=scan_end
    )
    full = scan_end - scan_end % 3
    triplets = values[:full].reshape(-1, 3) @ _TRIPLET_WEIGHTS

    over = np.flatnonzero(triplets > BASE45_PAIR_MAX)
    if over.size:
        group = int(over[0])
        start = group * 3
        return DecodeResult.failure(
            DecodeError.value_overflow(
                CODEC, int(triplets[group]), BASE45_PAIR_MAX, start, text[start:start + 3]
            )
        )
    if bad is not None:
        return DecodeResult.failure(DecodeError.invalid_character(CODEC, text[bad], bad))

    out = np.empty(triplets.size * 2 + (1 if scan_end > full else 0), dtype=np.uint8)
    out[0:triplets.size * 2:2] = (triplets >> 8).astype(np.uint8)
    out[1:triplets.size * 2:2] = (triplets & 0xFF).astype(np.uint8)
    if scan_end > full:
        single = int(values[full]) + int(values[full + 1]) * BASE45_BASE
        if single > BASE45_SINGLE_MAX:
            return DecodeResult.failure(
                DecodeError.value_overflow(CODEC, single, BASE45_SINGLE_MAX, full, text[full:])
            )
        out[-1] = single
    return DecodeResult.success(out.tobytes())


def try_decode(text: str) -> "typing.Tuple[bool, typing.Optional[bytes], typing.Optional[str]]":
    return decode(text).as_tuple()


def decode_or_raise(text: str) -> bytes:
    return decode(text).unwrap()


__all__ = ["decode", "decode_or_raise", "encode", "encoded_length", "try_decode"]
