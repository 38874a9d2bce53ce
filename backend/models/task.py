"""Tasks attached to relational projects."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Boolean

from database import Base, SerializerMixin, utcnow
from models.project import PRIORITIES

TASK_STATUSES = ('todo', 'in_progress', 'review', 'done')


class Task(SerializerMixin, Base):
    __tablename__ = "tasks"

    REQUIRED_FIELDS = ('title',)
    ENUM_FIELDS = {'status': TASK_STATUSES, 'priority': PRIORITIES}
    OWNER_FIELD = 'created_by'

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    status = Column(String(20), default='todo', nullable=False)
    priority = Column(String(20), default='medium', nullable=False)
    assigned_to = Column(String(36), ForeignKey("users.id"), index=True)
    estimated_hours = Column(Integer)
    actual_hours = Column(Integer, default=0)
    due_date = Column(DateTime(timezone=True))
    completed_at = Column(DateTime(timezone=True))
    archived = Column(Boolean, default=False, nullable=False)  # hidden from lists, kept for history
    created_by = Column(String(36), ForeignKey("users.id"))
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', status='{self.status}')>"
