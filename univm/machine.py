"""The fetch-decode-execute loop of the universal machine."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterable
from typing import BinaryIO

from univm.segments import Segments
from univm.words import immediate, opcode, registers

_WORD_MASK = 0xFFFFFFFF
_REGISTER_COUNT = 8


class MachineError(Exception):
    """Raised when the running program does something the machine forbids."""


class Opcode(enum.IntEnum):
    """The fourteen instructions of the machine."""

    CONDITIONAL_MOVE = 0
    SEGMENTED_LOAD = 1
    SEGMENTED_STORE = 2
    ADDITION = 3
    MULTIPLICATION = 4
    DIVISION = 5
    NAND = 6
    HALT = 7
    MAP_SEGMENT = 8
    UNMAP_SEGMENT = 9
    OUTPUT = 10
    INPUT = 11
    LOAD_PROGRAM = 12
    LOAD_VALUE = 13


class Machine:
    """A machine with eight registers, segmented memory and byte I/O.

    Input and output are binary streams; end of input reads as a word of
    all ones.
    """

    def __init__(
        self,
        program: Iterable[int],
        stdin: BinaryIO | None = None,
        stdout: BinaryIO | None = None,
    ) -> None:
        self.memory = Segments()
        self.memory.replace_program(program)
        self.registers = [0] * _REGISTER_COUNT
        self.program_counter = 0
        self._stdin = stdin if stdin is not None else sys.stdin.buffer
        self._stdout = stdout if stdout is not None else sys.stdout.buffer

    @property
    def running(self) -> bool:
        """Whether the program counter still lies inside segment 0."""
        return self.program_counter < len(self.memory.get(0))

    def step(self) -> bool:
        """Execute one instruction; return whether the machine can go on."""
        if not self.running:
            raise MachineError("the machine has stopped")
        word = self.memory.load(0, self.program_counter)
        code = opcode(word)
        self.program_counter += 1
        try:
            op = Opcode(code)
        except ValueError:
            raise MachineError(f"invalid opcode {code}") from None

        regs = self.registers
        if op is Opcode.LOAD_VALUE:
            a, value = immediate(word)
            regs[a] = value
            return self.running

        a, b, c = registers(word)
        match op:
            case Opcode.CONDITIONAL_MOVE:
                if regs[c] != 0:
                    regs[a] = regs[b]
            case Opcode.SEGMENTED_LOAD:
                regs[a] = self.memory.load(regs[b], regs[c])
            case Opcode.SEGMENTED_STORE:
                self.memory.store(regs[c], regs[a], regs[b])
            case Opcode.ADDITION:
                regs[a] = (regs[b] + regs[c]) & _WORD_MASK
            case Opcode.MULTIPLICATION:
                regs[a] = (regs[b] * regs[c]) & _WORD_MASK
            case Opcode.DIVISION:
                if regs[c] == 0:
                    raise MachineError("division by zero")
                regs[a] = regs[b] // regs[c]
            case Opcode.NAND:
                regs[a] = ~(regs[b] & regs[c]) & _WORD_MASK
            case Opcode.HALT:
                self.program_counter = len(self.memory.get(0))
            case Opcode.MAP_SEGMENT:
                regs[b] = self.memory.map(regs[c])
            case Opcode.UNMAP_SEGMENT:
                self.memory.unmap(regs[c])
            case Opcode.OUTPUT:
                self._output(regs[c])
            case Opcode.INPUT:
                regs[c] = self._input()
            case Opcode.LOAD_PROGRAM:
                self._load_program(regs[b], regs[c])
        return self.running

    def run(self) -> None:
        """Execute instructions until a halt or the end of segment 0."""
        while self.running:
            self.step()
        self._stdout.flush()

    def _output(self, value: int) -> None:
        if value > 255:
            raise MachineError(f"cannot output {value}: not a byte")
        self._stdout.write(bytes([value]))

    def _input(self) -> int:
        data = self._stdin.read(1)
        return data[0] if data else _WORD_MASK

    def _load_program(self, segment_id: int, counter: int) -> None:
        program = self.memory.get(segment_id)
        if counter >= len(program):
            raise MachineError(
                f"program counter {counter} is outside segment {segment_id} "
                f"of length {len(program)}"
            )
        if segment_id != 0:
            self.memory.replace_program(list(program))
        self.program_counter = counter


def run(
    program: Iterable[int],
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> Machine:
    """Run ``program`` to completion and return the stopped machine."""
    machine = Machine(program, stdin, stdout)
    machine.run()
    return machine