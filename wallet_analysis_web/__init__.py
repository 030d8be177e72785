"""Solana wallet analysis page and proxy for the external analysis service."""

__version__ = "1.0.0"
