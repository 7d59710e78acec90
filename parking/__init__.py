"""Domain parking service."""
