"""Medical view domain: per-period aggregation, scoring and trends."""
