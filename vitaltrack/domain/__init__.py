"""Domain layer: pure entities, rules and aggregation."""
