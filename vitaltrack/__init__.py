"""vitaltrack - personal health metrics classification and aggregation."""

__version__ = "0.1.0"
