"""Infrastructure: configuration, logging, id generation, persistence adapters."""
