"""Nutrition core: food entries, categories, keyword rules."""
