"""Read-only command-line client for Renegade wallets."""

__version__ = "0.1.0"
