"""Decoding of the fields packed into a 32-bit machine instruction."""

_OPCODE_SHIFT = 28
_OPCODE_MASK = 0xF
_REGISTER_MASK = 0x7
_IMMEDIATE_REGISTER_SHIFT = 25
_IMMEDIATE_MASK = (1 << 25) - 1


def opcode(word: int) -> int:
    """Return the opcode held in the top four bits of ``word``."""
    return (word >> _OPCODE_SHIFT) & _OPCODE_MASK


def registers(word: int) -> tuple[int, int, int]:
    """Return the register indices ``(a, b, c)`` of a three-register instruction."""
    return (
        (word >> 6) & _REGISTER_MASK,
        (word >> 3) & _REGISTER_MASK,
        word & _REGISTER_MASK,
    )


def immediate(word: int) -> tuple[int, int]:
    """Return ``(register, value)`` of a load-value instruction.

    The register is taken from bits 25 to 27, the value from the low 25 bits.
    """
    return (
        (word >> _IMMEDIATE_REGISTER_SHIFT) & _REGISTER_MASK,
        word & _IMMEDIATE_MASK,
    )