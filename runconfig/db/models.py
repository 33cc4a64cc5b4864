"""SQLAlchemy models for stored run configurations."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class StoredRunConfiguration(Base):
    """A run configuration persisted for a project."""
    __tablename__ = "run_configurations"
    __table_args__ = (UniqueConstraint("project", "name", name="uq_run_configuration_project_name"),)

    id = Column(Integer, primary_key=True)
    project = Column(String(200), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    module_name = Column(String(200), nullable=True)  # Denormalized from state_xml for listing
    state_xml = Column(Text, nullable=False)  # <configuration name=".."><module name=".."/></configuration>
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<StoredRunConfiguration(project='{self.project}', name='{self.name}', module='{self.module_name}')>"

    def to_dict(self):
        return {
            "id": self.id,
            "project": self.project,
            "name": self.name,
            "module_name": self.module_name,
            "state_xml": self.state_xml,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
