"""Alphabets, lookup tables and limits shared by the codecs."""

import numpy as np

ENGINE_VERSION = "1.0.0"

PAD = "="

HEX_DIGITS_LOWER = "0123456789abcdef"
HEX_SEPARATORS = frozenset(":-")

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE32_BITS = 5
BASE32_BLOCK = 8
# significant symbols in the final block -> pad characters
BASE32_PAD_FOR_SYMBOLS = {2: 6, 4: 4, 5: 3, 7: 1, 8: 0}

BASE45_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"
BASE45_BASE = 45
BASE45_PAIR_MAX = 0xFFFF
BASE45_SINGLE_MAX = 0xFF

BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE64_BLOCK = 4
BASE64URL_TRANSLATE_IN = str.maketrans("-_", "+/")
BASE64URL_TRANSLATE_OUT = str.maketrans("+/", "-_")

# lower-case letters spelled out so no Unicode case mapping touches the input
BASE32_INDEX = {
    **{ch: i for i, ch in enumerate(BASE32_ALPHABET)},
    **{ch.lower(): i for i, ch in enumerate(BASE32_ALPHABET) if ch.isalpha()},
}
BASE45_INDEX = {ch: i for i, ch in enumerate(BASE45_ALPHABET)}
BASE64_INDEX = {ch: i for i, ch in enumerate(BASE64_ALPHABET)}
BASE64_CHARS = frozenset(BASE64_ALPHABET)
# pad characters -> unused low bits in the last significant symbol
BASE64_SPARE_BITS = {0: 0, 1: 2, 2: 4}

# uint8 symbol tables; fancy-indexing them with symbol values yields ASCII bytes
BASE32_TABLE = np.frombuffer(BASE32_ALPHABET.encode("ascii"), dtype=np.uint8)
BASE45_TABLE = np.frombuffer(BASE45_ALPHABET.encode("ascii"), dtype=np.uint8)

MAX_INPUT_BYTES = 64 * 1024 * 1024
