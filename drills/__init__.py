"""Small self-contained programming exercises, one module each, with an RPN calculator command."""

__version__ = "0.1.0"