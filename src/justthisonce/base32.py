"""
RFC 4648 base32, as used for authenticator app secrets.

Encoding emits lowercase text padded with ``=`` to 8-character groups.
Decoding is case-insensitive but strict: the length must be a multiple of 8
and only 0, 1, 3, 4 or 6 padding characters may close the text.
"""
import re
from types import MappingProxyType
from typing import Mapping

from .exceptions import InvalidEncoding

ALPHABET = "abcdefghijklmnopqrstuvwxyz234567"

_DECODE_MAP: Mapping[str, int] = MappingProxyType({char: value for value, char in enumerate(ALPHABET)})

# padding can only be 1, 3, 4 or 6 characters: a final group holds 8, 16, 24 or 32 bits
_BASE32_RE = re.compile(r"[a-z2-7]*(?:=|={3}|={4}|={6})?", re.IGNORECASE | re.ASCII)


def encode(data: bytes) -> str:
    """
    Encodes bytes as padded, lowercase base32.

    Input is consumed 5 bytes (40 bits) at a time, producing 8 characters per
    group. A short final group is right-filled with zero bits up to a whole
    number of 5-bit symbols, and the remaining slots are padded with ``=``.

    :param data: bytes to encode
    :returns: base32 text, empty for empty input
    """
    chars = []
    for start in range(0, len(data), 5):
        group = data[start : start + 5]
        bit_count = len(group) * 8
        symbol_count = -(-bit_count // 5)
        bits = int.from_bytes(group, "big") << (symbol_count * 5 - bit_count)
        for shift in range((symbol_count - 1) * 5, -1, -5):
            chars.append(ALPHABET[(bits >> shift) & 0x1F])
        chars.append("=" * (8 - symbol_count))
    return "".join(chars)


def decode(text: str) -> bytes:
    """
    Decodes base32 text produced by :func:`encode` (or any RFC 4648 encoder).

    :param text: base32 text, any case
    :returns: the decoded bytes
    :raises InvalidEncoding: if the length, padding or alphabet is wrong
    """
    if not isinstance(text, str):
        raise InvalidEncoding("base32 input must be a string")
    if len(text) % 8 != 0:
        raise InvalidEncoding("base32 input length must be a multiple of 8")
    if _BASE32_RE.fullmatch(text) is None:
        raise InvalidEncoding("base32 input has invalid characters or padding")

    text = text.rstrip("=").lower()

    result = bytearray()
    accumulator = 0
    bit_count = 0
    for char in text:
        value = _DECODE_MAP.get(char)
        if value is None:
            raise InvalidEncoding("invalid character in base32 input: {0!r}".format(char))
        accumulator = (accumulator << 5) | value
        bit_count += 5
        # whole bytes are emitted as soon as they are available, so the zero
        # bits added by the encoder never form a byte of their own
        if bit_count >= 8:
            bit_count -= 8
            result.append(accumulator >> bit_count)
            accumulator &= (1 << bit_count) - 1
    return bytes(result)
