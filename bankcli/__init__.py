"""Terminal registration of bank accounts stored in CSV files."""

__version__ = "0.1.0"