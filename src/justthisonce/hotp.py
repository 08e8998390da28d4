import logging
from typing import Optional

from . import utils
from .options import HashFunction, OptionsLike, as_options
from .otp import generate_otp
from .secret import Secret, decode_secret

logger = logging.getLogger(__name__)


def generate_hotp(secret: Secret, counter: int, options: OptionsLike = None) -> str:
    """
    Generates the HOTP code for the given counter (RFC 4226).

    HOTP is defined over HMAC-SHA1, so ``options.hash_function`` is ignored.

    :param secret: the shared secret, as bytes or text in ``options.encoding``
    :param counter: the HMAC counter, kept and incremented by the caller
    :param options: :class:`Options`, a mapping of its fields, or None
    :returns: OTP
    """
    options = as_options(options)
    key = decode_secret(secret, options.encoding)
    return generate_otp(key, counter, HashFunction.SHA1, options.code_length)


def verify_hotp(candidate: Optional[str], secret: Secret, counter: int, options: OptionsLike = None) -> bool:
    """
    Verifies the OTP passed in against the OTP for ``counter``.

    An empty or missing candidate is rejected without touching the secret;
    any other bad input raises the same errors as :func:`generate_hotp`.

    :param candidate: the OTP to check against
    :param counter: the OTP HMAC counter
    """
    if not candidate:
        return False
    expected = generate_hotp(secret, counter, options)
    matched = utils.candidate_matches(candidate, expected)
    logger.debug("HOTP verification for counter %d: %s", counter, "match" if matched else "no match")
    return matched
