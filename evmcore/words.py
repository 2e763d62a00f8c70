"""Arithmetic, comparison and bitwise operations on 256-bit machine words.

Words are plain Python ints in the range ``0 <= value < 2**256``. Signed
operations read them as two's complement.
"""

from __future__ import annotations

import enum

BITS = 256
MODULUS = 1 << BITS
MAX_U256 = MODULUS - 1
SIGN_BIT_MASK = MAX_U256 >> 1
MIN_NEGATIVE_VALUE = 1 << (BITS - 1)


class Sign(enum.Enum):
    """Sign of a word read as a two's complement integer."""

    PLUS = "plus"
    MINUS = "minus"
    ZERO = "zero"


def i256_sign(value: int) -> Sign:
    """Return the sign of ``value`` read as a signed 256-bit integer."""
    if value & MIN_NEGATIVE_VALUE:
        return Sign.MINUS
    return Sign.ZERO if value == 0 else Sign.PLUS


def two_compl(value: int) -> int:
    """Return the two's complement negation of ``value``."""
    return -value & MAX_U256


def _sign_and_magnitude(value: int) -> tuple[Sign, int]:
    sign = i256_sign(value)
    return sign, two_compl(value) if sign is Sign.MINUS else value


def i256_cmp(first: int, second: int) -> int:
    """Compare two signed words; return -1, 0 or 1."""
    first_sign = i256_sign(first)
    second_sign = i256_sign(second)
    if first_sign is second_sign:
        # Within one sign the raw unsigned order is the signed order.
        return (first > second) - (first < second)
    rank = {Sign.MINUS: 0, Sign.ZERO: 1, Sign.PLUS: 2}
    return -1 if rank[first_sign] < rank[second_sign] else 1


def i256_div(first: int, second: int) -> int:
    """Signed division truncating toward zero; division by zero gives zero."""
    second_sign, divisor = _sign_and_magnitude(second)
    if second_sign is Sign.ZERO:
        return 0
    first_sign, dividend = _sign_and_magnitude(first)
    if first_sign is Sign.MINUS and dividend == MIN_NEGATIVE_VALUE and divisor == 1:
        return two_compl(MIN_NEGATIVE_VALUE)

    quotient = (dividend // divisor) & SIGN_BIT_MASK
    if quotient == 0:
        return 0
    negative = (first_sign is Sign.MINUS) != (second_sign is Sign.MINUS)
    return two_compl(quotient) if negative else quotient


def i256_mod(first: int, second: int) -> int:
    """Signed remainder whose sign follows the dividend.

    Raises ZeroDivisionError when ``second`` is zero.
    """
    first_sign, dividend = _sign_and_magnitude(first)
    if first_sign is Sign.ZERO:
        return 0
    _, divisor = _sign_and_magnitude(second)
    remainder = (dividend % divisor) & SIGN_BIT_MASK
    if remainder == 0:
        return 0
    return two_compl(remainder) if first_sign is Sign.MINUS else remainder


def wrapping_add(a: int, b: int) -> int:
    """ADD: sum modulo 2**256."""
    return (a + b) & MAX_U256


def wrapping_sub(a: int, b: int) -> int:
    """SUB: difference modulo 2**256."""
    return (a - b) & MAX_U256


def wrapping_mul(a: int, b: int) -> int:
    """MUL: product modulo 2**256."""
    return (a * b) & MAX_U256


def div(a: int, b: int) -> int:
    """DIV: unsigned division; division by zero gives zero."""
    return a // b if b else 0


def rem(a: int, b: int) -> int:
    """MOD: unsigned remainder; modulo zero gives zero."""
    return a % b if b else 0


def sdiv(a: int, b: int) -> int:
    """SDIV: signed division."""
    return i256_div(a, b)


def smod(a: int, b: int) -> int:
    """SMOD: signed remainder; modulo zero gives zero."""
    return i256_mod(a, b) if b else 0


def addmod(a: int, b: int, n: int) -> int:
    """ADDMOD: ``(a + b) % n`` without intermediate overflow; zero if ``n`` is zero."""
    return (a + b) % n if n else 0


def mulmod(a: int, b: int, n: int) -> int:
    """MULMOD: ``(a * b) % n`` without intermediate overflow; zero if ``n`` is zero."""
    return (a * b) % n if n else 0


def exp(base: int, exponent: int) -> int:
    """EXP: ``base ** exponent`` modulo 2**256."""
    return pow(base, exponent, MODULUS)


def signextend(size: int, value: int) -> int:
    """SIGNEXTEND: extend the sign of the low ``size + 1`` bytes of ``value``."""
    if size >= 32:
        return value
    bit_index = 8 * size + 7
    mask = (1 << bit_index) - 1
    if (value >> bit_index) & 1:
        return value | (~mask & MAX_U256)
    return value & mask


def lt(a: int, b: int) -> int:
    """LT: 1 if ``a < b`` unsigned, else 0."""
    return int(a < b)


def gt(a: int, b: int) -> int:
    """GT: 1 if ``a > b`` unsigned, else 0."""
    return int(a > b)


def slt(a: int, b: int) -> int:
    """SLT: 1 if ``a < b`` signed, else 0."""
    return int(i256_cmp(a, b) < 0)


def sgt(a: int, b: int) -> int:
    """SGT: 1 if ``a > b`` signed, else 0."""
    return int(i256_cmp(a, b) > 0)


def eq(a: int, b: int) -> int:
    """EQ: 1 if the words are equal, else 0."""
    return int(a == b)


def iszero(a: int) -> int:
    """ISZERO: 1 if the word is zero, else 0."""
    return int(a == 0)


def bitand(a: int, b: int) -> int:
    """AND."""
    return a & b


def bitor(a: int, b: int) -> int:
    """OR."""
    return a | b


def bitxor(a: int, b: int) -> int:
    """XOR."""
    return a ^ b


def bitnot(a: int) -> int:
    """NOT: bitwise complement within 256 bits."""
    return ~a & MAX_U256


def byte(index: int, value: int) -> int:
    """BYTE: the ``index``-th byte of ``value``, counting from the most significant."""
    if index >= 32:
        return 0
    return (value >> (8 * (31 - index))) & 0xFF


def shl(shift: int, value: int) -> int:
    """SHL: logical shift left."""
    if shift >= BITS:
        return 0
    return (value << shift) & MAX_U256


def shr(shift: int, value: int) -> int:
    """SHR: logical shift right."""
    if shift >= BITS:
        return 0
    return value >> shift


def sar(shift: int, value: int) -> int:
    """SAR: arithmetic shift right."""
    sign, magnitude = _sign_and_magnitude(value)
    if value == 0 or shift >= BITS:
        return two_compl(1) if sign is Sign.MINUS else 0
    if sign is Sign.MINUS:
        shifted = (((magnitude - 1) & MAX_U256) >> shift) + 1
        return two_compl(shifted & MAX_U256)
    return value >> shift