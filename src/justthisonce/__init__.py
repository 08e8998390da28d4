import logging

from . import base32 as base32
from .exceptions import InvalidArgument as InvalidArgument
from .exceptions import InvalidEncoding as InvalidEncoding
from .exceptions import InvalidSecret as InvalidSecret
from .exceptions import OTPError as OTPError
from .exceptions import RngFailure as RngFailure
from .hotp import generate_hotp as generate_hotp
from .hotp import verify_hotp as verify_hotp
from .options import ALLOWED_HASH_FUNCTIONS as ALLOWED_HASH_FUNCTIONS
from .options import DEFAULT_OPTIONS as DEFAULT_OPTIONS
from .options import Encoding as Encoding
from .options import HashFunction as HashFunction
from .options import Options as Options
from .otp import generate_otp as generate_otp
from .secret import decode_secret as decode_secret
from .secret import generate_secret as generate_secret
from .secret import generate_secret_sync as generate_secret_sync
from .totp import generate_totp as generate_totp
from .totp import time_counter as time_counter
from .totp import verify_totp as verify_totp

logging.getLogger(__name__).addHandler(logging.NullHandler())
