"""Company equipment inventory."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON

from database import Base, SerializerMixin, utcnow

EQUIPMENT_STATUSES = ('available', 'in_use', 'maintenance', 'retired')


class Equipment(SerializerMixin, Base):
    __tablename__ = "equipment"

    REQUIRED_FIELDS = ('name',)
    ENUM_FIELDS = {'status': EQUIPMENT_STATUSES}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    model = Column(String(100))
    serial_number = Column(String(100))
    category = Column(String(50))  # tools, vehicles, computers
    status = Column(String(20), default='available', nullable=False)
    assigned_to = Column(String(36), ForeignKey("users.id"), index=True)
    purchase_date = Column(DateTime(timezone=True))
    warranty_expiry = Column(DateTime(timezone=True))
    maintenance_schedule = Column(JSON, default=dict)
    location = Column(String(200))
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<Equipment(id={self.id}, name='{self.name}', status='{self.status}')>"
