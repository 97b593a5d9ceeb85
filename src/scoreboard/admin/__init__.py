"""Admin operations over the scoreboard store.

- Validates inputs against the stream rules
- Reads/writes through the repository, one transaction per operation
- Forbidden: aggregation, HTTP concerns
"""
