"""Persistence for client-side preferences."""
