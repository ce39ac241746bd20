"""Decode results and the error taxonomy shared by every codec.

Decoding failure is an expected outcome, so the codecs hand back a
``DecodeResult`` instead of raising. ``DecodeFailure`` exists only for callers
that ask for an exception via ``unwrap()`` or ``decode_or_raise()``.
"""

import enum
import typing
from dataclasses import dataclass


class DecodeErrorKind(enum.Enum):
    INVALID_LENGTH = "InvalidLength"
    INVALID_CHARACTER = "InvalidCharacter"
    VALUE_OVERFLOW = "ValueOverflow"
    EMPTY_INPUT = "EmptyInput"


@dataclass(frozen=True)
class DecodeError:
    kind: DecodeErrorKind
    message: str
    character: typing.Optional[str] = None
    index: typing.Optional[int] = None

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"

    @classmethod
    def invalid_length(cls, codec: str, length: int, rule: str) -> "DecodeError":
        return cls(
            DecodeErrorKind.INVALID_LENGTH,
            f"{codec} input length {length} is invalid ({rule})",
        )

    @classmethod
    def invalid_character(
        cls,
        codec: str,
        character: str,
        index: int,
        text: typing.Optional[str] = None,
        reason: str = "is not in the alphabet",
    ) -> "DecodeError":
        message = f"{codec} character {character!r} at index {index} {reason}"
        if text is not None:
            message += f" in {text!r}"
        return cls(DecodeErrorKind.INVALID_CHARACTER, message, character, index)

    @classmethod
    def value_overflow(cls, codec: str, value: int, limit: int, index: int, chunk: str) -> "DecodeError":
        return cls(
            DecodeErrorKind.VALUE_OVERFLOW,
            f"{codec} group {chunk!r} at index {index} decodes to {value}, above {limit}",
            index=index,
        )


class DecodeFailure(ValueError):
    """Raised when a failed ``DecodeResult`` is unwrapped."""

    def __init__(self, error: DecodeError):
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> DecodeErrorKind:
        return self.error.kind


@dataclass(frozen=True)
class DecodeResult:
    """Either decoded bytes or a ``DecodeError``; never both."""

    value: typing.Optional[bytes] = None
    error: typing.Optional[DecodeError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("DecodeResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: bytes) -> "DecodeResult":
        return cls(value=bytes(value))

    @classmethod
    def failure(cls, error: DecodeError) -> "DecodeResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> typing.Optional[DecodeErrorKind]:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> bytes:
        if self.error is not None:
            raise DecodeFailure(self.error)
        return self.value

    def unwrap_or(self, default: bytes) -> bytes:
        return default if self.error is not None else self.value

    def as_tuple(self) -> "typing.Tuple[bool, typing.Optional[bytes], typing.Optional[str]]":
        """TryParse form: ``(ok, data, diagnostic)``."""
        if self.error is not None:
            return False, None, str(self.error)
        return True, self.value, None


def coerce_bytes(data: "typing.Union[bytes, bytearray, memoryview]") -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Unsupported type for encoding: {type(data)!r}")


def require_text(text: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f"Unsupported type for decoding: {type(text)!r}")
    return text


__all__ = [
    "DecodeError",
    "DecodeErrorKind",
    "DecodeFailure",
    "DecodeResult",
    "coerce_bytes",
    "require_text",
]
