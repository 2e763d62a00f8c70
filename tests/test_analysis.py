import pytest

from evmcore.analysis import AnalysisData


def test_jump_set():
    jump = AnalysisData()
    assert not jump.is_jump()
    assert jump.gas_block() == 0

    jump.set_gas_block(2350)
    assert not jump.is_jump()
    assert jump.gas_block() == 2350

    jump.set_is_jump()
    assert jump.is_jump()
    assert jump.gas_block() == 2350

    jump.set_gas_block(10)
    assert jump.is_jump()
    assert jump.gas_block() == 10

    jump.set_gas_block(350)
    assert jump.is_jump()
    assert jump.gas_block() == 350


def test_set_is_jump_is_idempotent():
    data = AnalysisData()
    data.set_is_jump()
    data.set_is_jump()
    assert data.is_jump()
    assert data.gas_block() == 0


def test_equality_follows_contents():
    a = AnalysisData()
    b = AnalysisData()
    assert a == b
    a.set_gas_block(10)
    assert a != b
    b.set_gas_block(10)
    assert a == b


@pytest.mark.parametrize("bad", [-1, 1 << 32])
def test_gas_block_out_of_range(bad):
    with pytest.raises(ValueError):
        AnalysisData().set_gas_block(bad)