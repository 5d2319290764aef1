"""Medical view core: aggregate, summary models, trend services."""
