"""Stub test to verify CI pipeline works."""

import floatbits


def test_version() -> None:
    """Test that version is defined."""
    assert floatbits.__version__ == "1.0.0"


def test_float_to_binary_works() -> None:
    """Test that float_to_binary produces a 32-bit vector."""
    result = floatbits.float_to_binary(1.0)
    assert result.length == 32


def test_matches_native() -> None:
    """Test that the computed encoding matches the platform encoding."""
    computed = floatbits.float_to_binary(2.5)
    assert computed.equals(floatbits.native_binary(2.5))
