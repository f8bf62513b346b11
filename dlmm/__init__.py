"""Bin math, liquidity strategies, access checks and event codecs for a discretized-liquidity market maker."""

__version__ = "0.1.0"