import asyncio
import base64
import binascii
import logging
import os
from typing import Union

from . import base32
from .exceptions import InvalidArgument, InvalidEncoding, InvalidSecret, RngFailure
from .options import Encoding

logger = logging.getLogger(__name__)

Secret = Union[str, bytes, bytearray, memoryview]


def decode_secret(secret: Secret, encoding: Union[str, Encoding] = Encoding.BASE32) -> bytes:
    """
    Turns a secret into the raw key bytes fed to the HMAC.

    Byte sequences are returned unchanged. Strings are decoded with
    ``encoding``.

    :param secret: the shared secret, as bytes or encoded text
    :param encoding: base32, urlsafe-base64, base64, hex or ascii
    :raises InvalidSecret: if ``secret`` is neither bytes nor a non-empty string
    :raises InvalidEncoding: if the encoding is unknown or the text does not match it
    """
    if isinstance(secret, (bytes, bytearray, memoryview)):
        return secret
    if not secret or not isinstance(secret, str):
        raise InvalidSecret("secret should be a non-empty string or a byte sequence")

    encoding = Encoding.resolve(encoding)
    if encoding is Encoding.BASE32:
        return base32.decode(secret)
    if encoding is Encoding.URLSAFE_BASE64:
        return _b64decode(secret.replace("-", "+").replace("_", "/"))
    if encoding is Encoding.BASE64:
        return _b64decode(secret)
    if encoding is Encoding.HEX:
        try:
            return binascii.unhexlify(secret)
        except (binascii.Error, ValueError) as err:
            raise InvalidEncoding("secret is not valid hex") from err
    try:
        return secret.encode("ascii")
    except UnicodeEncodeError as err:
        raise InvalidEncoding("secret is not valid ascii") from err


def _b64decode(secret: str) -> bytes:
    # authenticator apps often drop the trailing padding
    missing_padding = len(secret) % 4
    if missing_padding != 0:
        secret += "=" * (4 - missing_padding)
    try:
        return base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError) as err:
        raise InvalidEncoding("secret is not valid base64") from err


def encode_secret(data: bytes, encoding: Union[str, Encoding] = Encoding.BASE32) -> str:
    """
    Renders key bytes as text. Hex, base64 and ascii output is lowercased.
    The ascii rendering keeps only the low 7 bits of each byte.
    """
    encoding = Encoding.resolve(encoding)
    if encoding is Encoding.BASE32:
        return base32.encode(data)
    if encoding is Encoding.URLSAFE_BASE64:
        return base64.urlsafe_b64encode(data).decode("ascii")
    if encoding is Encoding.BASE64:
        return base64.b64encode(data).decode("ascii").lower()
    if encoding is Encoding.HEX:
        return data.hex()
    return bytes(b & 0x7F for b in data).decode("ascii").lower()


def _check_num_bytes(num_bytes: int) -> None:
    if not isinstance(num_bytes, int) or isinstance(num_bytes, bool) or num_bytes < 1:
        raise InvalidArgument("num_bytes", "must be a positive integer")


def _random_bytes(num_bytes: int) -> bytes:
    try:
        return os.urandom(num_bytes)
    except OSError as err:
        logger.warning("random source failed while generating a %d byte secret", num_bytes)
        raise RngFailure("could not read {0} random bytes".format(num_bytes), num_bytes) from err


async def generate_secret(num_bytes: int, encoding: Union[str, Encoding] = Encoding.BASE32) -> str:
    """
    Generates a random secret suitable for HOTP/TOTP.

    The bytes are read from the OS random source in the event loop's default
    executor, so the loop is never blocked. Every failure, including a failing
    random source (:class:`RngFailure`), is raised when the coroutine is awaited.

    :param num_bytes: length of the key in bytes; 20 gives the 160 bits RFC 4226 recommends
    :param encoding: encoding of the returned text
    :returns: the encoded secret
    """
    _check_num_bytes(num_bytes)
    encoding = Encoding.resolve(encoding)
    loop = asyncio.get_running_loop()
    data = await loop.run_in_executor(None, _random_bytes, num_bytes)
    return encode_secret(data, encoding)


def generate_secret_sync(num_bytes: int, encoding: Union[str, Encoding] = Encoding.BASE32) -> str:
    """
    Blocking version of :func:`generate_secret`.
    """
    _check_num_bytes(num_bytes)
    encoding = Encoding.resolve(encoding)
    return encode_secret(_random_bytes(num_bytes), encoding)
