"""elmerlint: section-aware keyword validation for Elmer solver input files."""

__version__ = "0.1.0"
