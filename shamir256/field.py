"""
GF(2^8) Field Arithmetic
Addition, multiplication and division over bytes, plus the constant-time
helpers that keep secret-derived values off data-dependent branches.

Multiplication and division go through the log/exp tables. The zero
element has no logarithm, so its result is masked in afterwards with
constant_time_select instead of an if statement.
"""

from shamir256.errors import (
    FieldDivisionByZero,
    InvalidArgumentError,
    UndefinedBehaviorError,
)
from shamir256.tables import EXP_TABLE, LOG_TABLE

# Order of the multiplicative group of GF(2^8)
FIELD_ORDER = 255


def add(a: int, b: int) -> int:
    """Add two field elements. Also subtraction, since the field has characteristic 2."""
    return a ^ b


def mult(a: int, b: int) -> int:
    """Multiply two field elements."""
    # Range-checks both operands before they index the tables
    a_is_zero = constant_time_byte_eq(a, 0)
    b_is_zero = constant_time_byte_eq(b, 0)

    log_sum = (LOG_TABLE[a] + LOG_TABLE[b]) % FIELD_ORDER
    result = EXP_TABLE[log_sum]

    # Zero if either operand is zero, without branching on a or b
    result = constant_time_select(a_is_zero, 0, result)
    return constant_time_select(b_is_zero, 0, result)


def div(a: int, b: int) -> int:
    """
    Divide a by b in the field.

    Raises:
        InvalidArgumentError: If either operand falls outside 0..255.
        FieldDivisionByZero: If b is zero, which only happens with
            duplicate x-coordinates.
    """
    a_is_zero = constant_time_byte_eq(a, 0)
    if constant_time_byte_eq(b, 0):
        raise FieldDivisionByZero("Divide by zero")

    log_diff = ((LOG_TABLE[a] - LOG_TABLE[b]) + FIELD_ORDER) % FIELD_ORDER
    result = EXP_TABLE[log_diff]

    return constant_time_select(a_is_zero, 0, result)


def constant_time_select(v: int, x: int, y: int) -> int:
    """
    Return x if v == 1 and y if v == 0, using masks rather than a branch.

    Raises:
        UndefinedBehaviorError: For any other selector value.
    """
    if v != 0 and v != 1:
        raise UndefinedBehaviorError("Undefined behavior")
    return ~(v - 1) & x | (v - 1) & y


def constant_time_byte_eq(x: int, y: int) -> int:
    """
    Return 1 if x == y and 0 otherwise. Both inputs must be bytes (0..255).

    Raises:
        InvalidArgumentError: If either input falls outside 0..255.
    """
    if ((~0xFF) & x) | ((~0xFF) & y):
        raise InvalidArgumentError("Not uint8 values passed")
    # (0 - 1) >> 8 is -1, which has its low bit set; any 1..255 shifts to 0
    return ((x ^ y) - 1) >> 8 & 1
