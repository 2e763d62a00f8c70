"""Building blocks of an EVM interpreter: word arithmetic, opcodes, opcode info, analysis entries, memory, stack and stack instructions."""

__version__ = "0.1.0"

__all__ = ["words", "opcode", "opinfo", "analysis", "memory", "stack", "stackops"]