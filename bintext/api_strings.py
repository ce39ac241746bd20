"""String/byte codec convenience wrappers."""

from . import base32codec, base45codec, base64codec, base64urlcodec, hexcodec


def hexencode(data, lower: bool = True):
    return hexcodec.encode(data, lower=lower)


def b32encode(data):
    return base32codec.encode(data)


def b45encode(data):
    return base45codec.encode(data)


def b64encode(data):
    return base64codec.encode(data)


def b64urlencode(data):
    return base64urlcodec.encode(data)


def hexdecode(string: str):
    return hexcodec.decode(string)


def b32decode(string: str):
    return base32codec.decode(string)


def b45decode(string: str):
    return base45codec.decode(string)


def b64decode(string: str):
    return base64codec.decode(string)


def b64urldecode(string: str):
    return base64urlcodec.decode(string)


def b64encode_text(string: str):
    return base64codec.encode(string.encode("utf-8"))


def b64decode_text(string: str):
    return base64codec.decode(string).unwrap().decode("utf-8")


__all__ = [
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
    "hexdecode",
    "hexencode",
]
