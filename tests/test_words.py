import pytest

from univm.words import immediate, opcode, registers


def test_registers_example_word():
    word = 805306577
    assert opcode(word) == 3
    assert registers(word) == (3, 2, 1)


def test_load_value_example_word():
    word = 3724541969
    assert opcode(word) == 13
    assert immediate(word) == (7, 17)


@pytest.mark.parametrize("op", range(14))
@pytest.mark.parametrize("regs", [(0, 0, 0), (7, 7, 7), (1, 4, 6), (5, 0, 3)])
def test_three_register_round_trip(op, regs):
    a, b, c = regs
    word = (op << 28) | (a << 6) | (b << 3) | c
    assert opcode(word) == op
    assert registers(word) == regs


@pytest.mark.parametrize("reg", range(8))
@pytest.mark.parametrize("value", [0, 1, 17, (1 << 25) - 1])
def test_immediate_round_trip(reg, value):
    word = (13 << 28) | (reg << 25) | value
    assert opcode(word) == 13
    assert immediate(word) == (reg, value)


def test_unused_bits_are_ignored():
    base = (3 << 28) | (3 << 6) | (2 << 3) | 1
    noisy = base | (0x3FFFF << 9)
    assert registers(noisy) == registers(base)
    assert opcode(noisy) == opcode(base)


def test_opcode_stays_in_four_bits():
    assert opcode(0xFFFFFFFF) == 15