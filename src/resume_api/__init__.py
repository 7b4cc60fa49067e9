"""Developer resume backend with permission-based access control."""

__version__ = "0.1.0"
