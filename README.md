# univm

An interpreter for the Universal Machine. The machine has eight 32-bit
registers, a segmented word-addressed memory and fourteen instructions.

## Installing

    pip install .

## Running a program

A program is a binary file of 32-bit big-endian words. It usually has a
`.um` extension. Run it with:

    univm program.um

The machine reads input from standard input and writes output to
standard output, one byte per instruction. At end of input, an input
instruction puts `0xFFFFFFFF` in its register.

The command exits with one of these statuses:

- 0 when the program halts or runs past the end of segment 0.
- 1 when the file cannot be read. A message goes to standard error.
- 1 when the program breaks a rule of the machine. The message goes to
  standard error and starts with `error:`.

## Using it from Python

```python
import io

from univm.cli import read_program
from univm.machine import Machine, run

program = read_program("hello.um")
out = io.BytesIO()
machine = run(program, io.BytesIO(b""), out)   # returns the stopped machine
print(out.getvalue())

machine = Machine(program, io.BytesIO(b"input"), out)
machine.step()   # execute one instruction; returns machine.running
machine.run()    # continue until halt or end of segment 0
print(machine.registers, machine.program_counter)
```

`read_program(path)` returns the file's contents as a list of integers.
It ignores any trailing bytes that do not make up a whole word. It raises
`OSError` if the file cannot be read.

`Machine(program, stdin=None, stdout=None)` uses binary streams. If you
leave a stream out, the machine uses the process's standard input or
standard output. A `Machine` has these members:

- `registers`: a list of eight words.
- `program_counter`
- `memory`: the machine's `Segments`.
- `running`: true while the program counter is inside segment 0.

Calling `step()` on a stopped machine raises `MachineError`. The
instruction numbers are available as the `Opcode` enum.

### Building blocks

`univm.words` decodes instruction words:

- `opcode(word)` returns the opcode.
- `registers(word)` returns `(a, b, c)`.
- `immediate(word)` returns `(a, value)` for the load-value instruction.

`univm.segments.Segments` holds segmented memory. Segment 0 is the
running program. `replace_program(words)` sets the contents of segment 0.
It must be called before `map(length)`.

`map(length)` returns the identifier of a new zero-filled segment. It
reuses the most recently unmapped identifier first. Otherwise it gives
out `next_id`.

`unmap(segment_id)`, `get(segment_id)`, `load(segment_id, offset)` and
`store(word, segment_id, offset)` raise `SegmentError` in these cases:

- the identifier was never mapped;
- the identifier is unmapped;
- the offset is out of range;
- the call would unmap segment 0.

`free_ids` lists the identifiers that are waiting to be reused.
`len(segments)` counts every identifier slot, including segment 0.

## Errors

The machine raises `MachineError` in these cases:

- division by zero;
- output of a value above 255;
- an opcode of 14 or 15;
- a load-program instruction whose new counter lies outside the chosen
  segment.

Memory faults raise `SegmentError` from the segment store. These include
loading from, storing to or loading a program from an unmapped segment.