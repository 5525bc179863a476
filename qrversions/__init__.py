"""QR code version tables: symbol sizes, codeword counts, alignment patterns, version information and capacities."""

__version__ = "0.1.0"
__all__ = ["version", "capacity"]