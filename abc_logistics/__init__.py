"""ABC Logistics inventory management."""

__version__ = "0.1.0"
