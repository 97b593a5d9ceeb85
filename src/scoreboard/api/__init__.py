"""API module for the scoreboard.

- Validates inputs, calls admin operations and the aggregator
- Returns payloads for the UI
- Forbidden: direct SQLAlchemy queries
"""
