"""Glucose and blood pressure measurement domain."""
