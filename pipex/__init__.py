"""Run two commands as a pipeline between an input and an output file, with text, formatting, line-reading and buffer helpers."""

__version__ = "0.1.0"