"""User profile use cases."""
