"""Sort integers with two stacks and a fixed set of stack operations, plus small string, memory, output and list helpers."""

__version__ = "1.0.0"