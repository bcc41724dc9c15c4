"""A Universal Machine interpreter: instruction decoding, segmented memory,
the machine itself and a command-line runner."""

__version__ = "0.1.0"

__all__ = ["cli", "machine", "segments", "words"]