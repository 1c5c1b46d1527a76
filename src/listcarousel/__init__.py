"""Image carousel with a searchable item list and per-group statistics."""

__version__ = "0.1.0"
