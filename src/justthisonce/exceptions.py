from typing import Optional


class OTPError(ValueError):
    """
    Base class for every error raised by this package.
    """


class InvalidSecret(OTPError):
    """
    The secret is neither a byte sequence nor a non-empty string.
    """


class InvalidEncoding(OTPError):
    """
    Secret text does not match its declared encoding, or the encoding name is unknown.
    """


class InvalidArgument(OTPError):
    """
    A counter, time, code length or hash function failed validation.

    :param parameter: name of the offending parameter
    """

    def __init__(self, parameter: str, message: str) -> None:
        self.parameter = parameter
        super().__init__("{0}: {1}".format(parameter, message))


class RngFailure(OTPError):
    """
    The platform random source could not supply bytes.
    """

    def __init__(self, message: str, num_bytes: Optional[int] = None) -> None:
        self.num_bytes = num_bytes
        super().__init__(message)
