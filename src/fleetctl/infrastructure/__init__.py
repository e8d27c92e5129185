"""Infrastructure layer — SQLite storage and the fleet repository.

The database package depends only on stdlib and SQLAlchemy.
The repositories package bridges storage rows and domain aggregates.
"""
