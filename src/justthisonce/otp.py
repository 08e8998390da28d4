import hmac
from typing import Union

from .exceptions import InvalidArgument
from .options import MIN_CODE_LENGTH, HashFunction

# the HMAC message is an 8 byte big-endian counter
COUNTER_BYTES = 8
MAX_COUNTER = 2 ** (COUNTER_BYTES * 8) - 1


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def generate_otp(
    secret: bytes,
    counter: int,
    hash_function: Union[str, HashFunction] = HashFunction.SHA1,
    code_length: int = MIN_CODE_LENGTH,
) -> str:
    """
    Computes one code per RFC 4226 section 5.3, with the HMAC hash chosen by
    the caller (RFC 6238 allows SHA256 and SHA512 for TOTP).

    :param secret: the shared key, as bytes
    :param counter: the HMAC counter value. Usually either the HOTP counter,
        or the time counter derived from a timestamp
    :param hash_function: sha1, sha256 or sha512
    :param code_length: number of digits in the code, at least 6
    :returns: the code, zero-padded to ``code_length`` digits
    :raises InvalidArgument: naming the first parameter that fails validation
    """
    if not isinstance(secret, (bytes, bytearray, memoryview)) or len(secret) == 0:
        raise InvalidArgument("secret", "must be a non-empty byte sequence")
    if not _is_int(counter) or counter < 0 or counter > MAX_COUNTER:
        raise InvalidArgument("counter", "must be an integer between 0 and {0}".format(MAX_COUNTER))
    digest = HashFunction.resolve(hash_function).digest
    if not _is_int(code_length) or code_length < MIN_CODE_LENGTH:
        raise InvalidArgument("code_length", "must be an integer of at least {0}".format(MIN_CODE_LENGTH))

    # hmac only takes bytes or bytearray keys
    key = bytes(secret)
    message = counter.to_bytes(COUNTER_BYTES, "big")
    hmac_hash = bytearray(hmac.new(key, message, digest).digest())
    # dynamic truncation: the low nibble of the last byte picks a 4 byte window
    offset = hmac_hash[-1] & 0xF
    code = (
        (hmac_hash[offset] & 0x7F) << 24
        | (hmac_hash[offset + 1] & 0xFF) << 16
        | (hmac_hash[offset + 2] & 0xFF) << 8
        | (hmac_hash[offset + 3] & 0xFF)
    )
    return str(code % 10**code_length).rjust(code_length, "0")
