from hmac import compare_digest


def strings_equal(s1: str, s2: str) -> bool:
    """
    Compares two codes in constant time for equal-length input. The
    characters must match exactly; no Unicode normalisation is applied.

    Lone surrogates are kept through the encoding step so that malformed
    text simply fails to match.
    """
    return compare_digest(s1.encode("utf-8", "surrogatepass"), s2.encode("utf-8", "surrogatepass"))


def candidate_matches(candidate: object, expected: str) -> bool:
    """
    Compares a user supplied code with the expected one. Anything that is not
    a string never matches.
    """
    if not isinstance(candidate, str):
        return False
    return strings_equal(candidate, expected)
