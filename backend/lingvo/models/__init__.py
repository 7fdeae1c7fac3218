"""SQLAlchemy ORM models.

Individual models should be imported explicitly:
    from lingvo.models.user import User

All models are imported here so Alembic can detect them during migration
autogenerate. This module is imported by alembic/env.py.
"""

from lingvo.models.contact import Contact
from lingvo.models.message import Message
from lingvo.models.post import Post
from lingvo.models.user import User

__all__ = [
    "User",
    "Contact",
    "Message",
    "Post",
]
