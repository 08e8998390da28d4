import logging
import math
from numbers import Real
from typing import Optional

from . import utils
from .exceptions import InvalidArgument
from .options import OptionsLike, as_options
from .otp import generate_otp
from .secret import Secret, decode_secret

logger = logging.getLogger(__name__)

# windows tried by verify_totp, in order: current, one ahead, one behind
SKEW_OFFSETS = (0, 1, -1)

# floats above this no longer hold every integer millisecond
MAX_EXACT_FLOAT = 2**53


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _check_exact(parameter: str, value: Real) -> None:
    if isinstance(value, float) and abs(value) > MAX_EXACT_FLOAT:
        raise InvalidArgument(parameter, "floats above 2**53 are not exact; pass an int")


def time_counter(for_time: float, options: OptionsLike = None) -> int:
    """
    Converts a timestamp into the TOTP counter,
    ``floor((for_time - start_time) / time_step)``.

    :param for_time: milliseconds since the epoch
    :param options: supplies ``start_time`` and ``time_step`` (milliseconds)
    :returns: the time counter
    """
    options = as_options(options)
    if not _is_number(for_time):
        raise InvalidArgument("time", "must be a finite number of milliseconds")
    if not _is_number(options.start_time):
        raise InvalidArgument("start_time", "must be a finite number of milliseconds")
    if not _is_number(options.time_step) or options.time_step <= 0:
        raise InvalidArgument("time_step", "must be a positive number of milliseconds")
    _check_exact("time", for_time)
    _check_exact("start_time", options.start_time)
    _check_exact("time_step", options.time_step)
    counter = int((for_time - options.start_time) // options.time_step)
    if counter < 0:
        raise InvalidArgument("time", "must not be before start_time")
    return counter


def generate_totp(secret: Secret, for_time: float, options: OptionsLike = None) -> str:
    """
    Generates the TOTP code for the time step containing ``for_time`` (RFC 6238).

    :param secret: the shared secret, as bytes or text in ``options.encoding``
    :param for_time: milliseconds since the epoch, e.g. ``time.time() * 1000``
    :param options: :class:`Options`, a mapping of its fields, or None
    :returns: OTP value
    """
    options = as_options(options)
    key = decode_secret(secret, options.encoding)
    return generate_otp(key, time_counter(for_time, options), options.hash_function, options.code_length)


def verify_totp(candidate: Optional[str], secret: Secret, for_time: float, options: OptionsLike = None) -> bool:
    """
    Verifies the OTP passed in against the code for ``for_time``.

    Client and server clocks drift, so by default the codes for the previous
    and next time step are accepted too, making a code valid for three time
    steps. Set ``verify_with_one_time_step`` to only accept the current step.

    :param candidate: the OTP to check against
    :param for_time: milliseconds since the epoch
    :returns: True if verification succeeded, False otherwise
    """
    if not candidate:
        return False

    options = as_options(options)
    key = decode_secret(secret, options.encoding)
    counter = time_counter(for_time, options)
    offsets = (0,) if options.verify_with_one_time_step else SKEW_OFFSETS

    for offset in offsets:
        # there is no window before the first one
        if counter + offset < 0:
            continue
        expected = generate_otp(key, counter + offset, options.hash_function, options.code_length)
        if utils.candidate_matches(candidate, expected):
            if offset:
                logger.debug("TOTP code accepted %+d time step(s) from the current one", offset)
            return True
    return False
