# evmcore

Building blocks of an Ethereum Virtual Machine interpreter, in plain Python
with no dependencies. Machine words are Python `int` values in the range
`0 .. 2**256 - 1`; signed operations read them as two's complement.

## Modules

- `evmcore.words` – word arithmetic and bit operations:
  - `wrapping_add`, `wrapping_sub`, `wrapping_mul` (modulo `2**256`),
    `div` and `rem` (zero when dividing by zero), `sdiv`, `smod`,
    `addmod`, `mulmod` (zero when the modulus is zero), `exp`, `signextend`;
  - comparisons returning `1` or `0`: `lt`, `gt`, `slt`, `sgt`, `eq`, `iszero`;
  - `bitand`, `bitor`, `bitxor`, `bitnot`, `byte`, `shl`, `shr`, `sar`;
  - two's-complement helpers: the `Sign` enum (`PLUS`, `MINUS`, `ZERO`),
    `i256_sign`, `two_compl`, `i256_cmp` (returns `-1`, `0` or `1`),
    `i256_div` and `i256_mod` (the latter raises `ZeroDivisionError` for a
    zero divisor; `smod` returns `0` instead).
- `evmcore.opcode` – constants for every opcode byte (`ADD`, `PUSH1`,
  `SWAP16`, ...), the 256-entry `OPCODE_JUMPMAP` of mnemonics,
  `opcode_name(byte)` (returns `None` for an undefined byte) and the frozen
  `OpCode` dataclass with `OpCode.try_from_u8` and `as_str` (`"unknown"` for
  undefined bytes). Values outside `0..255` raise `ValueError`.
- `evmcore.opinfo` – `OpInfo`, a packed 32-bit entry holding a jump flag, a
  gas-block-end flag, a push flag and 29 bits of static gas. Build entries
  with `OpInfo.none()`, `fixed_gas(gas)`, `gas_block_end(gas)`,
  `dynamic_gas()`, `push_opcode(gas)` and `jumpdest()`; read them with
  `is_jump()`, `is_gas_block_end()`, `is_push()` and `gas()`.
- `evmcore.analysis` – `AnalysisData`, a per-position entry that records a
  jump-destination flag (`set_is_jump`, `is_jump`) and a gas block
  (`set_gas_block`, `gas_block`); setting the gas block keeps the flag.
- `evmcore.memory` – `Memory`, growable byte memory with `resize`,
  `get_slice`, `set_byte`, `set_u256`, `set`, `set_data` (zero-fills what lies
  past the end of the source data), `data()` and `effective_len()`; ranges
  outside the current size raise `IndexError`. `next_multiple_of_32` rounds
  a size up to a whole number of words.
- `evmcore.stack` – `Stack`, a word stack limited to 1024 items, with `push`,
  `push_b256`, `push_slice`, `pop`, `pop_many` (top first), `reduce_one`,
  `peek`, `set`, `dup` and `swap`. It raises `StackUnderflow` (an
  `IndexError`) or `StackOverflow` (an `OverflowError`) and leaves the stack
  unchanged when a push would overflow.
- `evmcore.stackops` – `execute(stack, opcode, immediate=b"")` runs POP,
  PUSH1–PUSH32, DUP1–DUP16 and SWAP1–SWAP16 on a stack and returns how many
  immediate bytes it consumed; missing PUSH operand bytes are read as zeros.

## Example

```python
from evmcore.words import sdiv, two_compl
from evmcore.stack import Stack
from evmcore.stackops import execute
from evmcore.opcode import PUSH2, opcode_name

assert sdiv(100, two_compl(1)) == two_compl(100)

stack = Stack()
stack.push(1)
stack.push(2)
stack.swap(1)
assert stack.pop() == 1

assert execute(stack, PUSH2, b"\x01\x00") == 2
assert stack.peek(0) == 256

assert opcode_name(0x01) == "ADD"
```

## What it does not do

This package holds the parts an interpreter is built from, not an
interpreter. It has no instruction loop, no program counter, no bytecode
analysis pass that fills `AnalysisData` entries, no per-fork gas tables or
gas accounting, no memory-expansion cost, and no host, storage, logs, calls
or contract creation. There is no command-line tool.

## Install

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```