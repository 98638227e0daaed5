"""Persistence: SQLAlchemy engine, ORM models, and read repositories."""
