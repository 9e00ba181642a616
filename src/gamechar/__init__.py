"""gamechar — validated character records with identity tracking."""

__version__ = "0.1.0"
