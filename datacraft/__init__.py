"""Generate values of test data from a JSON field specification."""

__version__ = "0.1.0"