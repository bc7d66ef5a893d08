"""Persistence adapters for the user domain."""
