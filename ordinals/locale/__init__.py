"""Locale identifier parsing and maximization."""
