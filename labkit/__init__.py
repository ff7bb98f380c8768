"""Small teaching implementations of a vector, a deque, prices, dates, a phone book and an RPN calculator."""

__version__ = "0.1.0"