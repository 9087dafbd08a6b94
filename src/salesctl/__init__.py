"""salesctl: customer management for the sales application."""

__version__ = "0.1.0"
