import dataclasses
import hashlib

import pytest

from justthisonce import ALLOWED_HASH_FUNCTIONS, DEFAULT_OPTIONS, Encoding, HashFunction, Options
from justthisonce.exceptions import InvalidArgument, InvalidEncoding
from justthisonce.options import as_options


def test_defaults():
    assert DEFAULT_OPTIONS.code_length == 6
    assert DEFAULT_OPTIONS.hash_function == "sha1"
    assert DEFAULT_OPTIONS.start_time == 0
    assert DEFAULT_OPTIONS.time_step == 30000
    assert DEFAULT_OPTIONS.encoding == "base32"
    assert DEFAULT_OPTIONS.verify_with_one_time_step is False


def test_options_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_OPTIONS.code_length = 8


def test_replace():
    options = DEFAULT_OPTIONS.replace(code_length=8)
    assert options.code_length == 8
    assert DEFAULT_OPTIONS.code_length == 6


def test_as_options():
    assert as_options(None) is DEFAULT_OPTIONS
    options = Options(time_step=60000)
    assert as_options(options) is options
    assert as_options({"time_step": 60000}) == options


@pytest.mark.parametrize("value", [{"digits": 6}, 6, "sha1"])
def test_as_options_rejects_bad_values(value):
    with pytest.raises(InvalidArgument):
        as_options(value)


def test_allowed_hash_functions():
    assert {h.value for h in ALLOWED_HASH_FUNCTIONS} == {"sha1", "sha256", "sha512"}


@pytest.mark.parametrize(
    "value,expected",
    [("SHA256", HashFunction.SHA256), (hashlib.sha512, HashFunction.SHA512), ("sha1", HashFunction.SHA1)],
)
def test_hash_function_resolve(value, expected):
    assert HashFunction.resolve(value) is expected


def test_hash_function_digest():
    assert HashFunction.SHA256.digest is hashlib.sha256


@pytest.mark.parametrize(
    "value,expected",
    [
        ("raw", Encoding.ASCII),
        ("URLSAFE_BASE64", Encoding.URLSAFE_BASE64),
        ("Base32", Encoding.BASE32),
        (Encoding.HEX, Encoding.HEX),
    ],
)
def test_encoding_resolve(value, expected):
    assert Encoding.resolve(value) is expected


@pytest.mark.parametrize("value", ["utf-16", "", None, 32])
def test_encoding_resolve_rejects_unknown(value):
    with pytest.raises(InvalidEncoding):
        Encoding.resolve(value)
