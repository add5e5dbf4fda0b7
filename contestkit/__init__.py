"""Solvers for short competitive-programming problems, with a contest-format command-line runner."""

__version__ = "0.1.0"