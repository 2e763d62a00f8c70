import pytest

from evmcore import words
from evmcore.words import (
    Sign,
    addmod,
    bitand,
    bitnot,
    bitor,
    bitxor,
    byte,
    div,
    eq,
    exp,
    gt,
    i256_cmp,
    i256_div,
    i256_mod,
    i256_sign,
    iszero,
    lt,
    mulmod,
    rem,
    sar,
    sdiv,
    sgt,
    shl,
    shr,
    signextend,
    slt,
    smod,
    two_compl,
    wrapping_add,
    wrapping_mul,
    wrapping_sub,
)

MAX = 2**256 - 1
MIN_NEG = 2**255
MAX_POS = 2**255 - 1


def neg(n):
    return (2**256 - n) % 2**256


# Cases carried over from the source's i256 division test.
def test_div_i256_source_cases():
    one = 1
    minus_one = 1
    one_hundred = 100
    fifty = 50
    two = 2
    neg_one_hundred = 100
    max_value = 2**255 - 1
    neg_max_value = 2**255 - 1
    assert i256_div(MIN_NEG, minus_one) == MIN_NEG
    assert i256_div(MIN_NEG, one) == MIN_NEG
    assert i256_div(max_value, one) == max_value
    assert i256_div(max_value, minus_one) == neg_max_value
    assert i256_div(one_hundred, minus_one) == neg_one_hundred
    assert i256_div(one_hundred, two) == fifty


def test_div_by_real_minus_one():
    assert i256_div(MIN_NEG, MAX) == MIN_NEG
    assert i256_div(100, MAX) == neg(100)
    assert i256_div(MAX_POS, MAX) == neg(MAX_POS)


def test_i256_div_zero_divisor():
    assert i256_div(123, 0) == 0


def test_sdiv_signs():
    assert sdiv(neg(4), 2) == neg(2)
    assert sdiv(neg(4), neg(2)) == 2
    assert sdiv(7, neg(2)) == neg(3)
    assert sdiv(1, 2) == 0


def test_i256_sign():
    assert i256_sign(0) is Sign.ZERO
    assert i256_sign(5) is Sign.PLUS
    assert i256_sign(MAX) is Sign.MINUS
    assert i256_sign(MIN_NEG) is Sign.MINUS


def test_two_compl():
    assert two_compl(1) == MAX
    assert two_compl(0) == 0
    assert two_compl(MIN_NEG) == MIN_NEG


def test_i256_cmp():
    assert i256_cmp(0, 0) == 0
    assert i256_cmp(0, 1) == -1
    assert i256_cmp(0, MAX) == 1
    assert i256_cmp(MAX, 1) == -1
    assert i256_cmp(neg(2), neg(1)) == -1
    assert i256_cmp(5, 3) == 1


def test_i256_mod_and_smod():
    assert smod(neg(7), 3) == neg(1)
    assert smod(7, neg(3)) == 1
    assert smod(7, 0) == 0
    assert i256_mod(0, 5) == 0
    assert i256_mod(9, 3) == 0


def test_i256_mod_zero_divisor_raises():
    with pytest.raises(ZeroDivisionError):
        i256_mod(5, 0)


def test_wrapping():
    assert wrapping_add(MAX, 1) == 0
    assert wrapping_sub(0, 1) == MAX
    assert wrapping_mul(2**255, 2) == 0
    assert wrapping_mul(3, 4) == 12


def test_div_rem_zero():
    assert div(10, 0) == 0
    assert rem(10, 0) == 0
    assert div(10, 3) == 3
    assert rem(10, 3) == 1


def test_addmod_mulmod():
    assert addmod(5, 6, 4) == 3
    assert addmod(5, 6, 0) == 0
    assert addmod(MAX, MAX, MAX) == 0
    assert mulmod(MAX, MAX, MAX) == 0
    assert mulmod(3, 4, 5) == 2
    assert mulmod(3, 4, 0) == 0


def test_exp():
    assert exp(2, 10) == 1024
    assert exp(2, 256) == 0
    assert exp(0, 0) == 1


def test_signextend():
    assert signextend(0, 0xFF) == MAX
    assert signextend(0, 0x7F) == 0x7F
    assert signextend(1, 0x80FF) == neg(0x7F01)
    assert signextend(0, 0x1FF) == MAX
    assert signextend(32, 0xFF) == 0xFF


def test_comparisons():
    assert lt(1, 2) == 1
    assert lt(2, 1) == 0
    assert gt(2, 1) == 1
    assert slt(MAX, 0) == 1
    assert sgt(MAX, 0) == 0
    assert sgt(1, MAX) == 1
    assert eq(7, 7) == 1
    assert eq(7, 8) == 0
    assert iszero(0) == 1
    assert iszero(3) == 0


def test_bitwise():
    assert bitand(0b1100, 0b1010) == 0b1000
    assert bitor(0b1100, 0b1010) == 0b1110
    assert bitxor(0b1100, 0b1010) == 0b0110
    assert bitnot(0) == MAX
    assert bitnot(MAX) == 0


def test_byte():
    assert byte(31, 0x1234) == 0x34
    assert byte(30, 0x1234) == 0x12
    assert byte(0, MIN_NEG) == 0x80
    assert byte(32, MAX) == 0


def test_shifts():
    assert shl(1, 1) == 2
    assert shl(255, 1) == MIN_NEG
    assert shl(256, 1) == 0
    assert shl(1, MAX) == MAX - 1
    assert shr(1, 2) == 1
    assert shr(255, MIN_NEG) == 1
    assert shr(256, MAX) == 0


def test_sar():
    assert sar(1, MAX) == MAX
    assert sar(4, neg(16)) == MAX
    assert sar(1, neg(16)) == neg(8)
    assert sar(300, neg(1)) == MAX
    assert sar(300, 5) == 0
    assert sar(1, 16) == 8
    assert sar(0, 0) == 0
    assert sar(254, MIN_NEG) == neg(2)


def test_results_stay_in_range():
    for value in (0, 1, MIN_NEG, MAX):
        for result in (
            bitnot(value),
            wrapping_add(value, MAX),
            signextend(0, value),
            sar(3, value),
            shl(7, value),
        ):
            assert 0 <= result <= words.MAX_U256