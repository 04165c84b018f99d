"""Compound interest calculator web app."""

__version__ = "0.1.0"
