"""User profile core: entities, value objects, factories, ports."""
