"""Application layer: command and query handlers over repository ports."""
