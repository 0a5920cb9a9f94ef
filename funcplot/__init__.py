"""Validate a one-variable math expression, convert it to postfix and plot it as text."""

__version__ = "0.1.0"