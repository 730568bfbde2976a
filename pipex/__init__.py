"""Run two commands as a pipeline between an input file and an output file,
with small C-style string, memory and output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "cstrings", "output", "linked", "resolve", "cli"]