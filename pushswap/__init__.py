"""Two-stack integer sorting with a restricted instruction set: stacks, input parsing, the sorter and a command line entry."""

__version__ = "1.0.0"