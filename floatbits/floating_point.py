"""
Single-precision floating point encoding from first principles.

Computes the IEEE 754 single-precision layout of a number with plain
arithmetic (halving, doubling and subtracting powers of two) instead of
reading the bytes the machine stores for it.

Layout (32 bits):

    | s | b1 b2 ... b8 | f1 f2 ... f23 |
      |        |              |
      |        |           fraction
      |     exponent
     sign

    x = (-1)^s * 2^(b1b2...b8 - 127) * 1.f1f2...f23

The vector is assembled in big-endian order (sign at index 0). For a
LSB-first bit order it is reversed once at the end, so that its bytes
match the little-endian storage of the same value.

The fraction is truncated, not rounded, once 23 bits are filled.
"""

import logging
import math
import struct

from floatbits.bits import DEFAULT_ORDER, MSB_FIRST, BitOrder
from floatbits.bitvector import BitVector

logger = logging.getLogger(__name__)

EXP_PRECISION = 8
FRACT_PRECISION = 23
EXP_BIAS = 127
MAX_EXP = 2**EXP_PRECISION - EXP_BIAS - 1
MIN_EXP = -EXP_BIAS
FLOAT_BITS = 1 + EXP_PRECISION + FRACT_PRECISION

SIGN_OFFSET = 0
EXP_OFFSET = 1
FRACT_OFFSET = 1 + EXP_PRECISION


def to_single(value: float) -> float:
    """
    Round a Python float to the nearest single-precision value.

    Values too large for single precision become infinity of the same sign.

    Args:
        value: Number to narrow

    Returns:
        The narrowed value, as a Python float
    """
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def get_exp_base_two(f: float) -> int:
    """
    Exponent of a non-negative number in binary scientific notation.

    By convention zero gets MIN_EXP and infinity gets MAX_EXP. The result
    is always within [MIN_EXP, MAX_EXP].

    Args:
        f: Non-negative magnitude

    Returns:
        Unbiased exponent e such that 2^e <= f < 2^(e+1)
    """
    if f == 0:
        return MIN_EXP
    if f == math.inf:
        return MAX_EXP

    if f >= 1:
        int_part = int(f)
        pos = 0
        while int_part != 0 and pos <= MAX_EXP:
            int_part //= 2
            pos += 1
        return pos - 1

    pos = 0
    while f < 1 and pos > MIN_EXP:
        f *= 2
        pos -= 1
    return pos


def _unsigned_to_vector(value: int, width: int) -> BitVector:
    """Big-endian vector of the low width bits of value."""
    vect = BitVector(width, order=MSB_FIRST)
    for i in range(width):
        vect.set_bit(i, (value >> (width - i - 1)) & 1)
    return vect


def _fraction_vectors(magnitude: float, exponent: int):
    """
    Encode the fraction of a finite magnitude.

    The integer part is written big-endian by subtracting powers of two,
    dropping the leading 1 of the normalized form. The decimal part is
    written by repeated doubling until the two vectors together hold
    FRACT_PRECISION bits or the remainder is exactly 0. When the integer
    part is zero, the leading 1 is dropped while doubling instead.

    Returns:
        (int_part_vect, decimal_part_vect), lengths summing to FRACT_PRECISION
    """
    int_part = int(magnitude)
    decimal_part = magnitude - int_part

    # May exceed FRACT_PRECISION, in which case the low bits are cut off
    int_part_length = max(exponent, 0)

    int_part_vect = BitVector(min(FRACT_PRECISION, int_part_length), order=MSB_FIRST)
    decimal_part_vect = BitVector(FRACT_PRECISION - int_part_vect.length, order=MSB_FIRST)

    leading_bit_discarded = False
    if int_part >= 2**int_part_length and int_part > 0:
        int_part -= 2**int_part_length
        leading_bit_discarded = True

    for i in range(int_part_vect.length):
        power_of_two = 2 ** (int_part_length - i - 1)
        if power_of_two > int_part:
            int_part_vect.set_bit(i, 0)
        else:
            int_part_vect.set_bit(i, 1)
            int_part -= power_of_two

    i = 0
    while i < decimal_part_vect.length and decimal_part != 0:
        decimal_part *= 2

        if leading_bit_discarded:
            if decimal_part >= 1:
                decimal_part_vect.set_bit(i, 1)
                decimal_part -= 1
            else:
                decimal_part_vect.set_bit(i, 0)
            i += 1
        elif decimal_part >= 1:
            decimal_part -= 1
            leading_bit_discarded = True

    return int_part_vect, decimal_part_vect


def float_to_binary(value: float, order: BitOrder = DEFAULT_ORDER, single: bool = True) -> BitVector:
    """
    Compute the single-precision binary representation of a number.

    Args:
        value: Number to encode (NaN is not supported)
        order: Bit order of the returned vector. MSB_FIRST keeps the sign
            at index 0; any other order reverses the finished vector.
        single: Narrow value to single precision first, as a C float
            parameter would. With False the fraction of the double is
            truncated to 23 bits.

    Returns:
        32-bit BitVector holding sign, biased exponent and fraction

    Raises:
        ValueError: If value is NaN
    """
    if math.isnan(value):
        raise ValueError("NaN has no encoding")

    if single:
        value = to_single(value)

    sign = 0
    magnitude = value
    if math.copysign(1.0, value) < 0:
        sign = 1
        magnitude = -value

    # Anything beyond the single-precision range encodes as infinity
    if magnitude >= 2.0 ** (MAX_EXP):
        magnitude = math.inf

    sign_vect = BitVector(1, order=MSB_FIRST)
    sign_vect.set_bit(0, sign)

    exponent = get_exp_base_two(magnitude)
    exp_vect = _unsigned_to_vector(exponent + EXP_BIAS, EXP_PRECISION)

    if magnitude == math.inf:
        int_part_vect = BitVector(0, order=MSB_FIRST)
        decimal_part_vect = BitVector(FRACT_PRECISION, order=MSB_FIRST)
    else:
        int_part_vect, decimal_part_vect = _fraction_vectors(magnitude, exponent)

    logger.debug(
        "encoding %r: sign=%d exponent=%d fraction=%d+%d bits",
        value,
        sign,
        exponent,
        int_part_vect.length,
        decimal_part_vect.length,
    )

    float_vect = BitVector(FLOAT_BITS, order=order)
    float_vect.copy_from(sign_vect, SIGN_OFFSET)
    float_vect.copy_from(exp_vect, EXP_OFFSET)
    float_vect.copy_from(int_part_vect, FRACT_OFFSET)
    float_vect.copy_from(decimal_part_vect, FRACT_OFFSET + int_part_vect.length)

    # Built big-endian so far; flip once to match the requested order
    if not order.msb_first:
        float_vect.reverse()

    return float_vect


def native_binary(value: float, order: BitOrder = DEFAULT_ORDER) -> BitVector:
    """
    Single-precision encoding produced by the platform, for comparison.

    The packed bytes are copied into a new vector: big-endian bytes for a
    MSB-first order, little-endian bytes otherwise, so that the result is
    directly comparable with float_to_binary(value, order).

    Args:
        value: Number to encode
        order: Bit order of the returned vector

    Returns:
        32-bit BitVector
    """
    fmt = ">f" if order.msb_first else "<f"
    return BitVector(FLOAT_BITS, struct.pack(fmt, to_single(value)), order)
