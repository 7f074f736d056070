from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from models.base import Base, utcnow

class ProjectSubscription(Base):
    __tablename__ = "project_subscriptions"
    __table_args__ = (UniqueConstraint("project_id", "user_id", name="uq_project_subscriptions_project_user"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
