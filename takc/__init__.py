"""Support library for a Tak compiler front end: tokens, type data, syntax tree nodes, literal text helpers, configuration, command-line flags and terminal output."""

__version__ = "0.1.0"