"""Terminal chat client and toy inventory manager."""

__version__ = "0.1.0"
