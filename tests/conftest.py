import pytest

# RFC 4226 appendix D / RFC 6238 appendix B
RFC_SECRET_SHA1 = b"12345678901234567890"
RFC_SECRET_SHA256 = b"12345678901234567890123456789012"
RFC_SECRET_SHA512 = b"1234567890123456789012345678901234567890123456789012345678901234"


@pytest.fixture
def rfc_secret() -> bytes:
    return RFC_SECRET_SHA1
