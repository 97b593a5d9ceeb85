"""Aggregation module for results tables.

- Reads DB and produces per-college totals for a stream/category
- Forbidden: writes of any kind
"""
