"""Static per-opcode information: jump flag, gas block end, push flag and gas."""

from __future__ import annotations

from dataclasses import dataclass

JUMP_MASK = 0x80000000
GAS_BLOCK_END_MASK = 0x40000000
IS_PUSH_MASK = 0x20000000
GAS_MASK = 0x1FFFFFFF


def _check_gas(gas: int) -> int:
    if not 0 <= gas <= GAS_MASK:
        raise ValueError(f"gas does not fit in 29 bits: {gas}")
    return gas


@dataclass(frozen=True)
class OpInfo:
    """Packed opcode information.

    Layout of ``data``: IS_JUMP (1 bit) | IS_GAS_BLOCK_END (1 bit) |
    IS_PUSH (1 bit) | gas (29 bits).
    """

    data: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.data <= 0xFFFFFFFF:
            raise ValueError(f"packed data does not fit in 32 bits: {self.data}")

    def is_jump(self) -> bool:
        """Whether the opcode is a jump destination."""
        return self.data & JUMP_MASK == JUMP_MASK

    def is_gas_block_end(self) -> bool:
        """Whether the opcode ends a gas block."""
        return self.data & GAS_BLOCK_END_MASK == GAS_BLOCK_END_MASK

    def is_push(self) -> bool:
        """Whether the opcode is one of the PUSH instructions."""
        return self.data & IS_PUSH_MASK == IS_PUSH_MASK

    def gas(self) -> int:
        """The static gas of the opcode."""
        return self.data & GAS_MASK

    @classmethod
    def none(cls) -> "OpInfo":
        """Information for an undefined opcode."""
        return cls(0)

    @classmethod
    def gas_block_end(cls, gas: int) -> "OpInfo":
        """An opcode with static ``gas`` that ends the current gas block."""
        return cls(_check_gas(gas) | GAS_BLOCK_END_MASK)

    @classmethod
    def dynamic_gas(cls) -> "OpInfo":
        """An opcode whose gas is computed while it runs."""
        return cls(0)

    @classmethod
    def fixed_gas(cls, gas: int) -> "OpInfo":
        """An opcode with static ``gas``."""
        return cls(_check_gas(gas))

    @classmethod
    def push_opcode(cls, gas: int) -> "OpInfo":
        """A PUSH opcode with static ``gas``."""
        return cls(_check_gas(gas) | IS_PUSH_MASK)

    @classmethod
    def jumpdest(cls) -> "OpInfo":
        """The JUMPDEST opcode: a jump target that ends a gas block."""
        return cls(JUMP_MASK | GAS_BLOCK_END_MASK)