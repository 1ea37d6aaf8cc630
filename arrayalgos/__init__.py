"""Classic array algorithms, most with a simple and a faster variant."""

__version__ = "0.1.0"