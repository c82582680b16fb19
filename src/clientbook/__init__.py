"""clientbook — typed-value validation for client and transaction records."""

__version__ = "0.1.0"
