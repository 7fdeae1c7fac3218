"""Database engine and session factory.

Use explicit imports: ``from lingvo.db.postgres import Base``.
"""
