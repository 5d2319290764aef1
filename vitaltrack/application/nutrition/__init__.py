"""Food intake use cases."""
