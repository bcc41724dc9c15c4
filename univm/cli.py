"""Command-line entry point: load a program file and run it."""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Sequence
from pathlib import Path

from univm.machine import Machine, MachineError
from univm.segments import SegmentError

_WORD_SIZE = 4


def read_program(path: str | Path) -> list[int]:
    """Read a program file as big-endian 32-bit words.

    Trailing bytes that do not make up a whole word are ignored.
    Raises ``OSError`` if the file cannot be read.
    """
    data = Path(path).read_bytes()
    count = len(data) // _WORD_SIZE
    return list(struct.unpack(f">{count}I", data[: count * _WORD_SIZE]))


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="univm", description="Run a universal machine program."
    )
    parser.add_argument("program", help="path of the .um program file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program named on the command line; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        program = read_program(args.program)
    except OSError:
        sys.stderr.write(
            f"The given file {args.program} was unable to be read as it is "
            "not in the proper format.\n"
            "Please try again with a proper .um file.\n"
        )
        return 1

    machine = Machine(program, sys.stdin.buffer, sys.stdout.buffer)
    try:
        machine.run()
    except (MachineError, SegmentError) as error:
        sys.stdout.flush()
        sys.stderr.write(f"error: {error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())