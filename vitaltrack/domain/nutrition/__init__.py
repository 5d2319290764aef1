"""Food intake domain."""
