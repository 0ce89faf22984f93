"""Run two commands as a pipeline between an input file and an output file, with small text helpers."""

__version__ = "0.1.0"