from sqlalchemy import Column, Integer, String, Text, ForeignKey, Index
from models.base import Base, TimestampMixin

class ProjectFeedItem(Base, TimestampMixin):
    __tablename__ = "project_feed_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    author_id = Column(String(64), nullable=False)
    content = Column(Text, nullable=False)

Index("idx_project_feed_items_project_created_at", ProjectFeedItem.project_id, ProjectFeedItem.created_at.desc())
