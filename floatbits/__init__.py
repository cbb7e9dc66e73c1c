"""
floatbits

Bit vectors over byte storage, and an arithmetic-only encoder that
computes the IEEE 754 single-precision layout of a number without
looking at the bytes the machine stores for it.
"""

__version__ = "1.0.0"

from floatbits.bits import DEFAULT_ORDER, LSB_FIRST, MSB_FIRST, BitOrder
from floatbits.bitvector import BitVector
from floatbits.floating_point import float_to_binary, get_exp_base_two, native_binary

__all__ = [
    "BitOrder",
    "BitVector",
    "DEFAULT_ORDER",
    "LSB_FIRST",
    "MSB_FIRST",
    "float_to_binary",
    "get_exp_base_two",
    "native_binary",
    "__version__",
]
