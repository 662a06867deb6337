"""Command-line interface for nmeaparse."""
