"""Persistence layer: SQLAlchemy tables and repository implementations."""
