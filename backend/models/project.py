"""Client-facing projects tracked in the relational store."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship

from database import Base, SerializerMixin, utcnow

PROJECT_STATUSES = ('active', 'completed', 'on_hold', 'cancelled')
PRIORITIES = ('low', 'medium', 'high', 'urgent')


class Project(SerializerMixin, Base):
    """Project owned by the user who created it."""

    __tablename__ = "projects"

    REQUIRED_FIELDS = ('name',)
    ENUM_FIELDS = {'status': PROJECT_STATUSES, 'priority': PRIORITIES}
    OWNER_FIELD = 'created_by'

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    client_name = Column(String(200))
    client_email = Column(String(200))
    status = Column(String(20), default='active', nullable=False)
    priority = Column(String(20), default='medium', nullable=False)
    start_date = Column(DateTime(timezone=True))
    end_date = Column(DateTime(timezone=True))
    estimated_hours = Column(Integer)
    actual_hours = Column(Integer, default=0)
    budget = Column(Integer)  # cents
    spent = Column(Integer, default=0)  # cents
    assigned_to = Column(String(36), ForeignKey("users.id"))
    created_by = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    color = Column(String(20), default='blue')
    tags = Column(JSON, default=list)
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    parts = relationship("ProjectPart", back_populates="project", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Project(id={self.id}, name='{self.name}', created_by={self.created_by})>"
