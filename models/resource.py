from sqlalchemy import Column, Integer, String, Text
from models.base import TimestampMixin


class ResourceMixin(TimestampMixin):
    """Columns shared by projects and project ideas."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    summary = Column(Text, nullable=False)
    # JSON-encoded list of author names, see core.authors.encode_authors
    authors = Column(Text, nullable=False)
    location = Column(String(255), nullable=True)
    pitch_deck = Column(String(1024), nullable=True)
    estimated_resources = Column(Text, nullable=True)
    author_id = Column(String(64), nullable=False)
