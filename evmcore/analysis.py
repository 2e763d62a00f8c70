"""Per-byte results of bytecode analysis: jump flag and gas block."""

from __future__ import annotations

JUMP_MASK = 0x80000000
_U32_MAX = 0xFFFFFFFF


class AnalysisData:
    """Packs a jump-destination flag (top bit) and a 31-bit gas block."""

    __slots__ = ("_packed",)

    def __init__(self) -> None:
        self._packed = 0

    def set_is_jump(self) -> None:
        """Mark this position as a valid jump destination."""
        self._packed |= JUMP_MASK

    def set_gas_block(self, gas_block: int) -> None:
        """Store the gas block, keeping the jump flag."""
        if not 0 <= gas_block <= _U32_MAX:
            raise ValueError(f"gas block out of range: {gas_block}")
        self._packed = gas_block | (self._packed & JUMP_MASK)

    def is_jump(self) -> bool:
        """Whether this position is a valid jump destination."""
        return self._packed & JUMP_MASK == JUMP_MASK

    def gas_block(self) -> int:
        """The gas block stored at this position."""
        return self._packed & ~JUMP_MASK & _U32_MAX

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnalysisData):
            return NotImplemented
        return self._packed == other._packed

    def __hash__(self) -> int:
        return hash(self._packed)

    def __repr__(self) -> str:
        return f"AnalysisData(is_jump={self.is_jump()}, gas_block={self.gas_block()})"