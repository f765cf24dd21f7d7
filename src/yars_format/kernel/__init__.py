"""Formatting kernel: value model, parsing, canonicalization, emission.

Pure functions only; no file or process I/O happens here.
"""
