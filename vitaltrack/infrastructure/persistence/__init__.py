"""Persistence adapters and repository factory."""
