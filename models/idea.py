from sqlalchemy import Index
from models.base import Base
from models.resource import ResourceMixin

class ProjectIdea(Base, ResourceMixin):
    __tablename__ = "project_ideas"

Index("idx_project_ideas_created_at", ProjectIdea.created_at.desc())
Index("idx_project_ideas_author_id", ProjectIdea.author_id)
