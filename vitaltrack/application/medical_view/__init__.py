"""Medical view use cases: summaries, trends, reports."""
