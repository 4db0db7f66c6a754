"""Intrinsic value estimates with a two-stage discounted cash flow model."""

__version__ = "0.1.0"