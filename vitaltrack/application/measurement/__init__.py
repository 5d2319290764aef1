"""Glucose and pressure measurement use cases."""
