import dataclasses
import hashlib
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

from .exceptions import InvalidArgument, InvalidEncoding

MIN_CODE_LENGTH = 6


class HashFunction(str, Enum):
    """
    Hash functions allowed in the HMAC. HOTP always uses SHA1.
    """

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @classmethod
    def _missing_(cls, value: object) -> Optional["HashFunction"]:
        # "SHA256" from an otpauth URI, or hashlib.sha256 itself
        if callable(value):
            try:
                value = value().name
            except (TypeError, AttributeError):
                return None
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @property
    def digest(self) -> Callable[..., Any]:
        return getattr(hashlib, self.value)

    @classmethod
    def resolve(cls, value: Union[str, "HashFunction", Callable[..., Any]]) -> "HashFunction":
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgument(
                "hash_function", "must be one of {0}".format(", ".join(m.value for m in cls))
            ) from None


class Encoding(str, Enum):
    """
    Text encodings a secret may be supplied in.
    """

    BASE32 = "base32"
    URLSAFE_BASE64 = "urlsafe-base64"
    BASE64 = "base64"
    HEX = "hex"
    ASCII = "ascii"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Encoding"]:
        if not isinstance(value, str):
            return None
        lowered = value.lower().replace("_", "-")
        if lowered == "raw":
            return cls.ASCII
        for member in cls:
            if member.value == lowered:
                return member
        return None

    @classmethod
    def resolve(cls, value: Union[str, "Encoding"]) -> "Encoding":
        try:
            return cls(value)
        except ValueError:
            raise InvalidEncoding("unrecognized encoding: {0!r}".format(value)) from None


ALLOWED_HASH_FUNCTIONS = frozenset(HashFunction)


@dataclasses.dataclass(frozen=True)
class Options:
    """
    Settings shared by the HOTP and TOTP functions. The defaults match
    Google Authenticator.

    :param code_length: number of digits in the code, at least 6
    :param hash_function: HMAC hash for TOTP; HOTP ignores it and uses SHA1
    :param start_time: TOTP epoch, in milliseconds
    :param time_step: TOTP window length, in milliseconds
    :param encoding: encoding of secrets given as strings
    :param verify_with_one_time_step: if set, TOTP verification only accepts
        the current window instead of the window either side of it as well
    """

    code_length: int = MIN_CODE_LENGTH
    hash_function: Union[str, HashFunction] = HashFunction.SHA1
    start_time: int = 0
    time_step: int = 30000
    encoding: Union[str, Encoding] = Encoding.BASE32
    verify_with_one_time_step: bool = False

    def replace(self, **changes: Any) -> "Options":
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS = Options()

OptionsLike = Union[None, Options, Mapping[str, Any]]

_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(Options))


def as_options(options: OptionsLike) -> Options:
    """
    Accepts ``None``, an :class:`Options` or a mapping of its field names.
    """
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, Options):
        return options
    if isinstance(options, Mapping):
        unknown = set(options) - _FIELD_NAMES
        if unknown:
            raise InvalidArgument("options", "unknown option(s) {0}".format(", ".join(sorted(unknown))))
        return Options(**options)
    raise InvalidArgument("options", "must be an Options instance or a mapping")
