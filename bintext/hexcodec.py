"""Hexadecimal (base16) codec."""

import typing

from .constants import HEX_DIGITS_LOWER, HEX_SEPARATORS
from .errors import DecodeError, DecodeResult, coerce_bytes, require_text

CODEC = "hex"
_HEX_CHARS = frozenset(HEX_DIGITS_LOWER + HEX_DIGITS_LOWER.upper())


def encode(
    data: "typing.Union[bytes, bytearray, memoryview]",
    lower: bool = True,
    start: int = 0,
    length: typing.Optional[int] = None,
) -> str:
    """
    Encode bytes as hex digit pairs, high nibble first.

    Args:
        data: Bytes to encode
        lower: Emit ``a-f`` when true, ``A-F`` otherwise
        start: First byte of the sub-range to encode
        length: Number of bytes to encode (default: to the end)

    Returns:
        Hex text without prefix or separators
    """
    raw = coerce_bytes(data)
    if start < 0 or start > len(raw):
        raise ValueError(f"start {start} is outside a {len(raw)}-byte input")
    end = len(raw) if length is None else start + length
    if length is not None and (length < 0 or end > len(raw)):
        raise ValueError(f"length {length} from {start} is outside a {len(raw)}-byte input")
    text = raw[start:end].hex()
    return text if lower else text.upper()


def _clean(text: str) -> str:
    cleaned = "".join(ch for ch in text if not (ch.isspace() or ch in HEX_SEPARATORS))
    if cleaned[:2] in ("0x", "0X"):
        cleaned = cleaned[2:]
    return cleaned


def decode(text: str) -> DecodeResult:
    cleaned = _clean(require_text(text))
    if not cleaned:
        return DecodeResult.success(b"")
    if len(cleaned) % 2:
        return DecodeResult.failure(
            DecodeError.invalid_length(CODEC, len(cleaned), "odd number of digits")
        )
    # one pass over the whole string so the diagnostic can quote it
    for index, ch in enumerate(cleaned):
        if ch not in _HEX_CHARS:
            return DecodeResult.failure(
                DecodeError.invalid_character(CODEC, ch, index, text=cleaned)
            )
    return DecodeResult.success(bytes.fromhex(cleaned))


def try_decode(text: str) -> "typing.Tuple[bool, typing.Optional[bytes], typing.Optional[str]]":
    return decode(text).as_tuple()


def decode_or_raise(text: str) -> bytes:
    return decode(text).unwrap()


__all__ = ["decode", "decode_or_raise", "encode", "try_decode"]
