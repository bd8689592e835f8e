"""Adapters – integrations with web frameworks (optional extras)."""
