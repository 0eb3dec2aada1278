"""Sort integers with the push_swap stack operations: stacks, argument parsing, sorting and a command line."""

__version__ = "1.0.0"