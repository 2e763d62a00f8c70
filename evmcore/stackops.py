"""Execution of the stack instructions: POP, PUSHn, DUPn and SWAPn."""

from __future__ import annotations

from .opcode import DUP1, DUP16, POP, PUSH1, PUSH32, SWAP1, SWAP16
from .stack import Stack


def execute(stack: Stack, opcode: int, immediate: bytes = b"") -> int:
    """Run one stack instruction on ``stack``.

    ``immediate`` holds the code bytes that follow the opcode; a PUSH reads
    its operand from there, padding missing bytes with zeros. Returns the
    number of immediate bytes consumed.
    """
    if opcode == POP:
        stack.reduce_one()
        return 0
    if PUSH1 <= opcode <= PUSH32:
        size = opcode - PUSH1 + 1
        operand = bytes(immediate[:size]).ljust(size, b"\x00")
        stack.push_slice(operand)
        return size
    if DUP1 <= opcode <= DUP16:
        stack.dup(opcode - DUP1 + 1)
        return 0
    if SWAP1 <= opcode <= SWAP16:
        stack.swap(opcode - SWAP1 + 1)
        return 0
    raise ValueError(f"not a stack instruction: {opcode:#04x}")