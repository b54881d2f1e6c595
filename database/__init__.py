"""Persistence: ORM models, session factory and the question repository."""
