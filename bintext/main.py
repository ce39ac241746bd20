# BINTEXT CODEC FRONT END ->

import argparse
import os
import sys
import typing
from pathlib import Path

from . import base32codec, base45codec, base64codec, base64urlcodec, hexcodec
from .constants import MAX_INPUT_BYTES
from .version import __version__


def _env_int(name: str) -> typing.Optional[int]:
    value = os.getenv(name)
    if not value:
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return None
    if parsed <= 0:
        return None
    return parsed


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0") == "1"


def _human_readable_size(num_bytes: int) -> str:
    units = ["B", "KiB", "MiB", "GiB"]
    value = float(num_bytes)
    for unit in units:
        if value < 1024.0 or unit == units[-1]:
            return f"{value:.2f} {unit}"
        value /= 1024.0
    return f"{value:.2f} TiB"


def _normalize_path(path_like: typing.Union[str, Path]) -> Path:
    path = path_like if isinstance(path_like, Path) else Path(str(path_like))
    path = path.expanduser()
    try:
        return path.resolve(strict=False)
    except OSError:
        return path


def _ensure_size_limit(size: int, label: str, max_bytes: typing.Optional[int] = None) -> None:
    limit = max_bytes or _env_int("BINTEXT_MAX_INPUT_BYTES") or MAX_INPUT_BYTES
    if size > limit:
        raise ValueError(
            f"{label} is {_human_readable_size(size)}, exceeding the "
            f"{_human_readable_size(limit)} input limit"
        )


def _read_input(text: typing.Optional[str], file: typing.Optional[str]) -> bytes:
    if text is not None:
        return text.encode("utf-8")
    if file:
        path = _normalize_path(file)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")
        _ensure_size_limit(path.stat().st_size, path.name)
        return path.read_bytes()
    limit = _env_int("BINTEXT_MAX_INPUT_BYTES") or MAX_INPUT_BYTES
    data = sys.stdin.buffer.read(limit + 1)
    _ensure_size_limit(len(data), "stdin", limit)
    return data


def _read_encoded(text: typing.Optional[str], file: typing.Optional[str]) -> str:
    if text is not None:
        return text
    decoded = _read_input(None, file).decode("utf-8")
    # files and pipes usually end with a newline the codec alphabet may not allow
    if decoded.endswith("\r\n"):
        return decoded[:-2]
    if decoded.endswith("\n"):
        return decoded[:-1]
    return decoded


def _add_io_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "codec",
        help="Codec name: hex, base32, base45, base64, base64url (aliases: 16, 32, 45, 64, url)"
    )
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Input text (read from --file or stdin when omitted)"
    )
    parser.add_argument(
        "-f", "--file",
        default=None,
        help="Read input from this file"
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write the result to this file instead of stdout"
    )
    parser.add_argument(
        "--silent",
        action="store_true",
        help="Suppress informational output"
    )


def cli(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="bintext", description="Binary-to-text codec suite")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Encode bytes (TEXT as UTF-8, a file, or stdin)")
    _add_io_arguments(encode)
    encode.add_argument(
        "--upper",
        action="store_true",
        help="Emit upper-case hex digits (hex only; BINTEXT_HEX_UPPER=1 sets the default)"
    )
    decode = subparsers.add_parser("decode", help="Decode text back into raw bytes")
    _add_io_arguments(decode)

    args = parser.parse_args(argv)

    method_map = {
        "hex": "hex",
        "16": "hex",
        "b16": "hex",
        "base16": "hex",
        "32": "base32",
        "b32": "base32",
        "base32": "base32",
        "45": "base45",
        "b45": "base45",
        "base45": "base45",
        "64": "base64",
        "b64": "base64",
        "base64": "base64",
        "url": "base64url",
        "64url": "base64url",
        "b64url": "base64url",
        "base64url": "base64url",
    }
    codecs = {
        "hex": hexcodec,
        "base32": base32codec,
        "base45": base45codec,
        "base64": base64codec,
        "base64url": base64urlcodec,
    }

    normalized = method_map.get(args.codec.lower())
    if not normalized:
        parser.error(f"Unsupported codec '{args.codec}'")
    codec = codecs[normalized]

    if args.command == "encode":
        try:
            data = _read_input(args.text, args.file)
        except (OSError, ValueError) as exc:
            print(f"Failed to read input: {exc}", file=sys.stderr)
            return 1
        if normalized == "hex":
            encoded = codec.encode(data, lower=not (args.upper or _env_flag("BINTEXT_HEX_UPPER")))
        else:
            encoded = codec.encode(data)
        if args.output:
            out_path = _normalize_path(args.output)
            out_path.write_text(encoded + "\n", encoding="utf-8", newline="\n")
            if not args.silent:
                print(f"{out_path.name}: {len(encoded)} characters")
        else:
            print(encoded)
        return 0

    try:
        text = _read_encoded(args.text, args.file)
    except (OSError, ValueError) as exc:
        print(f"Failed to read input: {exc}", file=sys.stderr)
        return 1
    result = codec.decode(text)
    if not result.ok:
        print(f"Failed to decode: {result.error}", file=sys.stderr)
        return 1
    if args.output:
        out_path = _normalize_path(args.output)
        out_path.write_bytes(result.value)
        if not args.silent:
            print(f"{out_path.name}: {_human_readable_size(len(result.value))}")
    else:
        sys.stdout.buffer.write(result.value)
        sys.stdout.buffer.flush()
    return 0


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
