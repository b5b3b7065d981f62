"""rentctl — car-rental pricing and transaction CLI."""

__version__ = "0.1.0"
