"""Parts ordered for a project."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from database import Base, SerializerMixin, utcnow
from models.project import PRIORITIES

PART_STATUSES = ('needed', 'ordered', 'received', 'installed')


class ProjectPart(SerializerMixin, Base):
    __tablename__ = "project_parts"

    REQUIRED_FIELDS = ('project_id', 'part_name', 'category')
    ENUM_FIELDS = {'status': PART_STATUSES, 'priority': PRIORITIES}
    OWNER_FIELD = 'added_by'

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    part_name = Column(String(200), nullable=False)
    part_number = Column(String(100))
    description = Column(Text)
    category = Column(String(50), nullable=False)  # electronics, mechanical, consumables, tools
    vendor = Column(String(200))
    unit_price = Column(String(20))  # kept as text, vendors quote in mixed formats
    quantity_needed = Column(Integer, default=1, nullable=False)
    quantity_ordered = Column(Integer, default=0, nullable=False)
    quantity_received = Column(Integer, default=0, nullable=False)
    status = Column(String(20), default='needed', nullable=False)
    priority = Column(String(20), default='medium', nullable=False)
    estimated_delivery = Column(DateTime(timezone=True))
    actual_delivery = Column(DateTime(timezone=True))
    order_number = Column(String(100))
    notes = Column(Text)
    added_by = Column(String(36), ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    project = relationship("Project", back_populates="parts")

    def __repr__(self):
        return f"<ProjectPart(id={self.id}, part_name='{self.part_name}', status='{self.status}')>"
