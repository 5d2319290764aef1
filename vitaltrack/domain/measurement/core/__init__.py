"""Measurement core: entities, value objects, rules, factories, ports."""
