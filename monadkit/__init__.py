"""Functional containers: Either, unions of three to five alternatives, IO wrappers, do and Futures."""

__version__ = "0.1.0"