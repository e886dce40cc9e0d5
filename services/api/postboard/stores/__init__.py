"""Data stores.

Stores handle:
- In-memory user and post collections (process-local, not persisted)

No business logic in stores - that belongs in services.
"""
