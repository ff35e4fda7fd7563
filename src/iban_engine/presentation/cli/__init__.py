"""Command-line interface for the IBAN engine."""
