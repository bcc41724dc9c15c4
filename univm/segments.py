"""Segmented memory: numbered arrays of 32-bit words."""

from __future__ import annotations

from collections.abc import Iterable

_WORD_MASK = 0xFFFFFFFF


class SegmentError(Exception):
    """Raised on an invalid access to segmented memory."""


class Segments:
    """Segmented memory with identifier reuse.

    Segment 0 holds the running program. Identifiers of unmapped segments
    are reused, most recently unmapped first, before new ones are issued.
    """

    def __init__(self) -> None:
        self._mapped: list[list[int] | None] = []
        self._free: list[int] = []
        self._next_id = 1

    def __len__(self) -> int:
        """Number of identifier slots, mapped or not, including segment 0."""
        return len(self._mapped)

    @property
    def next_id(self) -> int:
        """Identifier that the next fresh mapping will receive."""
        return self._next_id

    @property
    def free_ids(self) -> tuple[int, ...]:
        """Unmapped identifiers awaiting reuse, the next to be reused last."""
        return tuple(self._free)

    def replace_program(self, program: Iterable[int]) -> None:
        """Make ``program`` the contents of segment 0."""
        words = [word & _WORD_MASK for word in program]
        if self._mapped:
            self._mapped[0] = words
        else:
            self._mapped.append(words)

    def map(self, length: int) -> int:
        """Map a new zero-filled segment of ``length`` words; return its id."""
        if length < 0:
            raise SegmentError(f"segment length must not be negative: {length}")
        if not self._mapped:
            raise SegmentError("segment 0 must be loaded before mapping")
        segment = [0] * length
        if self._free:
            segment_id = self._free.pop()
            self._mapped[segment_id] = segment
        else:
            segment_id = self._next_id
            self._next_id += 1
            self._mapped.append(segment)
        return segment_id

    def unmap(self, segment_id: int) -> None:
        """Unmap a segment, making its identifier available for reuse."""
        if segment_id == 0:
            raise SegmentError("segment 0 cannot be unmapped")
        self.get(segment_id)
        self._mapped[segment_id] = None
        self._free.append(segment_id)

    def store(self, word: int, segment_id: int, offset: int) -> None:
        """Store ``word`` at ``offset`` in the given segment."""
        segment = self.get(segment_id)
        self._check_offset(segment, segment_id, offset)
        segment[offset] = word & _WORD_MASK

    def load(self, segment_id: int, offset: int) -> int:
        """Return the word at ``offset`` in the given segment."""
        segment = self.get(segment_id)
        self._check_offset(segment, segment_id, offset)
        return segment[offset]

    def get(self, segment_id: int) -> list[int]:
        """Return the words of a mapped segment."""
        if not 0 <= segment_id < len(self._mapped):
            raise SegmentError(f"segment {segment_id} has never been mapped")
        segment = self._mapped[segment_id]
        if segment is None:
            raise SegmentError(f"segment {segment_id} is not mapped")
        return segment

    @staticmethod
    def _check_offset(segment: list[int], segment_id: int, offset: int) -> None:
        if not 0 <= offset < len(segment):
            raise SegmentError(
                f"offset {offset} is outside segment {segment_id} "
                f"of length {len(segment)}"
            )