from sqlalchemy import Index
from models.base import Base
from models.resource import ResourceMixin

class Project(Base, ResourceMixin):
    # likes, subscriptions and feed items reference this table with ON DELETE CASCADE
    __tablename__ = "projects"

Index("idx_projects_created_at", Project.created_at.desc())
Index("idx_projects_author_id", Project.author_id)
