"""User interface for CivicEcho."""
