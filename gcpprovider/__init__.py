"""API types, encoding, lookups, configuration loading and secret validation for a GCP provider extension."""

__version__ = "0.1.0"